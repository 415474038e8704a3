"""Pure domain services: type inference, serialization, head injection."""

from .head_injector import insert_links_into_head
from .resource_type import EXTENSION_TYPES, SUFFIX_TYPES, infer_resource_type
from .tag_serializer import render_element

__all__ = [
    "EXTENSION_TYPES",
    "SUFFIX_TYPES",
    "infer_resource_type",
    "insert_links_into_head",
    "render_element",
]
