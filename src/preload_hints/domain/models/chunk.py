from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chunk:
    """
    Named group of output files produced by a build.

    Fields:
        id: Chunk identifier assigned by the bundler
        files: Output file paths in the order the bundler emitted them
        name: Chunk name (entry or named split point), if any
        hash: Rendered content hash, used to match chunks against documents
        initial: Whether the chunk is loaded on initial page load
        parents: Identifiers of the chunks this chunk was split from
        groups: Names of the chunk groups that contain this chunk
    """

    id: str
    files: tuple[str, ...] = ()
    name: str | None = None
    hash: str | None = None
    initial: bool = False
    parents: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize list inputs to tuples so the chunk stays hashable."""
        for attr in ("files", "parents", "groups"):
            value = getattr(self, attr)
            if not isinstance(value, tuple):
                object.__setattr__(self, attr, tuple(value))


@dataclass(frozen=True)
class ChunkGroup:
    """
    Chunk group (entrypoint or async split point).

    A group without parents is a root entrypoint.
    """

    name: str
    chunks: tuple[str, ...] = ()
    parents: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for attr in ("chunks", "parents"):
            value = getattr(self, attr)
            if not isinstance(value, tuple):
                object.__setattr__(self, attr, tuple(value))

    @property
    def is_root(self) -> bool:
        return not self.parents


@dataclass
class Compilation:
    """
    Read-only view of one build's output.

    Fields:
        chunks: Every chunk of the build, in bundler order
        chunk_groups: Chunk groups keyed by name
        assets: Names of every emitted asset
        public_path: Prefix prepended to file paths to build URLs
        errors: Error channel read by the host after the build
    """

    chunks: list[Chunk] = field(default_factory=list)
    chunk_groups: dict[str, ChunkGroup] = field(default_factory=dict)
    assets: list[str] = field(default_factory=list)
    public_path: str = ""
    errors: list[str] = field(default_factory=list)

    def get_chunk(self, chunk_id: str) -> Chunk | None:
        for chunk in self.chunks:
            if chunk.id == chunk_id:
                return chunk
        return None

    def get_chunk_group(self, name: str) -> ChunkGroup | None:
        return self.chunk_groups.get(name)
