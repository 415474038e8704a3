"""Domain models for resource hint generation."""

from .chunk import Chunk, ChunkGroup, Compilation
from .document import AssetChunk, DocumentPayload
from .link import LinkDescriptor

__all__ = [
    "AssetChunk",
    "Chunk",
    "ChunkGroup",
    "Compilation",
    "DocumentPayload",
    "LinkDescriptor",
]
