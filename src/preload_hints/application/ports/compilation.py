from typing import Protocol, Sequence, runtime_checkable

from ...domain.models.chunk import Chunk, ChunkGroup


@runtime_checkable
class CompilationPort(Protocol):
    """
    Protocol for the build output the pipeline reads from.

    Implementation Requirements:
    - chunks must be returned in bundler order
    - chunk_groups must contain every group referenced by Chunk.groups
    - the pipeline never mutates the compilation; only the plugin boundary appends to errors
    """

    chunks: Sequence[Chunk]
    assets: Sequence[str]
    public_path: str
    errors: list[str]

    def get_chunk(self, chunk_id: str) -> Chunk | None:
        """Look up a chunk by identifier, None if unknown."""
        ...

    def get_chunk_group(self, name: str) -> ChunkGroup | None:
        """Look up a chunk group by name, None if unknown."""
        ...
