"""Application services composing the resource hint pipeline."""

from .association import ASSOCIATION_VARIANTS, BuildVersion, does_chunk_belong_to_html
from .attribute_resolver import determine_as_value, resolve_link
from .chunk_extractor import extract_chunks
from .file_selector import select_files

__all__ = [
    "ASSOCIATION_VARIANTS",
    "BuildVersion",
    "determine_as_value",
    "does_chunk_belong_to_html",
    "extract_chunks",
    "resolve_link",
    "select_files",
]
