"""Domain service mapping resource URLs to `as` keywords."""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit

# Checked before EXTENSION_TYPES so "app.worker.js" is not reported as a script.
SUFFIX_TYPES: dict[str, str] = {
    ".worker.js": "worker",
    ".worker.mjs": "worker",
}

EXTENSION_TYPES: dict[str, str] = {
    ".js": "script",
    ".mjs": "script",
    ".cjs": "script",
    ".css": "style",
    ".png": "image",
    ".jpg": "image",
    ".jpeg": "image",
    ".gif": "image",
    ".webp": "image",
    ".avif": "image",
    ".svg": "image",
    ".ico": "image",
    ".bmp": "image",
    ".woff": "font",
    ".woff2": "font",
    ".ttf": "font",
    ".otf": "font",
    ".eot": "font",
    ".mp3": "audio",
    ".wav": "audio",
    ".ogg": "audio",
    ".oga": "audio",
    ".flac": "audio",
    ".aac": "audio",
    ".m4a": "audio",
    ".mp4": "video",
    ".webm": "video",
    ".ogv": "video",
    ".mov": "video",
    ".html": "document",
    ".htm": "document",
    ".json": "fetch",
}


def url_path(href: str) -> str:
    """
    Path component of an href, without query string or fragment.

    Hrefs are URLs: a literal "#" in a file name starts a fragment here, as it
    does for the browser requesting the resource.
    """
    return urlsplit(href).path


def infer_resource_type(href: str) -> str | None:
    """
    Infer the `as` keyword from the href's file extension.

    Returns None for a missing or unknown extension; the caller omits the attribute.
    """
    path = url_path(href).lower()
    for suffix, resource_type in SUFFIX_TYPES.items():
        if path.endswith(suffix):
            return resource_type
    extension = posixpath.splitext(path)[1]
    return EXTENSION_TYPES.get(extension)
