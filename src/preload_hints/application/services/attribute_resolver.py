from __future__ import annotations

import re
from typing import Mapping

from ...domain.errors import InvalidOptionError
from ...domain.models.link import ANONYMOUS, FONT, PRELOAD, LinkDescriptor
from ...domain.services.resource_type import infer_resource_type
from ..dto.options import AsOption


def determine_as_value(href: str, as_option: AsOption = None) -> str | None:
    """
    Resolve the `as` keyword for a preloaded href.

    Precedence: fixed string, then callable of the href, then the first
    matching pattern of a mapping, then extension inference. A mapping
    without a matching pattern falls back to inference.

    Raises:
        InvalidOptionError: If as_option has an unsupported type
    """
    if as_option is None:
        return infer_resource_type(href)
    if isinstance(as_option, str):
        return as_option
    if isinstance(as_option, Mapping):
        for pattern, keyword in as_option.items():
            if re.search(pattern, href):
                return keyword
        return infer_resource_type(href)
    if callable(as_option):
        return as_option(href)
    raise InvalidOptionError("as", as_option, hint="Use a string, a mapping of patterns, or a callable")


def resolve_link(
    file: str,
    public_path: str,
    rel: str,
    as_option: AsOption = None,
) -> LinkDescriptor:
    """
    Build the link descriptor for one selected file.

    Args:
        file: Output file path
        public_path: Prefix concatenated as-is in front of file
        rel: Link relation keyword
        as_option: Override for resource-type inference (preload only)

    Returns:
        LinkDescriptor; `as` and crossorigin are only set for preload links
    """
    href = f"{public_path}{file}"
    if rel != PRELOAD:
        return LinkDescriptor(href=href, rel=rel)

    as_value = determine_as_value(href, as_option)
    # Fonts fetched without CORS mode can't reuse the preloaded response.
    crossorigin = ANONYMOUS if as_value == FONT else None
    return LinkDescriptor(href=href, rel=rel, as_=as_value, crossorigin=crossorigin)
