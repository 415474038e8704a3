"""Chunk-to-document association, one variant per supported build version."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping

from ...domain.errors import UnsupportedBuildVersion
from ...domain.models.chunk import Chunk
from ...domain.models.document import AssetChunk
from ..ports.compilation import CompilationPort

AssociationFn = Callable[[Chunk, CompilationPort, Mapping[str, AssetChunk]], bool]


class BuildVersion(str, Enum):
    """Build-system major versions with distinct association semantics."""

    V3 = "v3"
    V4 = "v4"

    @classmethod
    def parse(cls, value: "str | BuildVersion") -> "BuildVersion":
        """
        Resolve an identifier to a BuildVersion.

        Raises:
            UnsupportedBuildVersion: If value is not one of the supported identifiers
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedBuildVersion(value, [v.value for v in cls]) from e


def belongs_to_html_v3(
    chunk: Chunk,
    compilation: CompilationPort,
    html_asset_chunks: Mapping[str, AssetChunk],
) -> bool:
    """
    Match the chunk, or any chunk it was split from, against the document's chunk hashes.

    Parent links are followed through the compilation; cycles are visited once.
    """
    root_hashes = {info.hash for info in html_asset_chunks.values() if info.hash}
    if not root_hashes:
        return False

    visited: set[str] = set()
    pending = [chunk]
    while pending:
        current = pending.pop()
        if current.id in visited:
            continue
        visited.add(current.id)
        if current.hash in root_hashes:
            return True
        for parent_id in current.parents:
            parent = compilation.get_chunk(parent_id)
            if parent is not None:
                pending.append(parent)
    return False


def _root_group_names(compilation: CompilationPort, group_name: str) -> set[str]:
    roots: set[str] = set()
    visited: set[str] = set()
    pending = [group_name]
    while pending:
        name = pending.pop()
        if name in visited:
            continue
        visited.add(name)
        group = compilation.get_chunk_group(name)
        # Unknown groups are treated as entrypoints of their own.
        if group is None or group.is_root:
            roots.add(name)
            continue
        pending.extend(group.parents)
    return roots


def belongs_to_html_v4(
    chunk: Chunk,
    compilation: CompilationPort,
    html_asset_chunks: Mapping[str, AssetChunk],
) -> bool:
    """
    Walk each chunk group up to its entrypoints and match entry names against the document.
    """
    entry_names = set(html_asset_chunks)
    for group_name in chunk.groups:
        if _root_group_names(compilation, group_name) & entry_names:
            return True
    return False


ASSOCIATION_VARIANTS: dict[BuildVersion, AssociationFn] = {
    BuildVersion.V3: belongs_to_html_v3,
    BuildVersion.V4: belongs_to_html_v4,
}


def does_chunk_belong_to_html(
    version: BuildVersion,
    chunk: Chunk,
    compilation: CompilationPort,
    html_asset_chunks: Mapping[str, AssetChunk],
) -> bool:
    return ASSOCIATION_VARIANTS[version](chunk, compilation, html_asset_chunks)
