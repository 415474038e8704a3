"""Resource hint (<link rel="preload"/"prefetch">) injection for generated HTML."""

from .application.dto.options import PreloadOptions
from .application.services.association import BuildVersion
from .application.use_cases.add_links import add_links
from .domain.models import AssetChunk, Chunk, ChunkGroup, Compilation, DocumentPayload, LinkDescriptor
from .infrastructure.plugin import PreloadPlugin

__all__ = [
    "AssetChunk",
    "BuildVersion",
    "Chunk",
    "ChunkGroup",
    "Compilation",
    "DocumentPayload",
    "LinkDescriptor",
    "PreloadOptions",
    "PreloadPlugin",
    "add_links",
]

__version__ = "0.1.0"
