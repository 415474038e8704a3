"""Compilation adapter backed by a bundler stats JSON file (`webpack --json`)."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable

from ...domain.models.chunk import Chunk, ChunkGroup, Compilation
from ...domain.models.document import AssetChunk

logger = logging.getLogger(__name__)

ANONYMOUS_GROUP_PREFIX = "chunk-"


def load_stats(stats_path: Path | str) -> dict[str, Any]:
    """
    Read a stats JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    path = Path(stats_path)
    if not path.exists():
        raise FileNotFoundError(f"Stats file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Stats file must contain a JSON object: {path}")
    return data


def _asset_names(raw_assets: Iterable[Any]) -> list[str]:
    names: list[str] = []
    for asset in raw_assets:
        name = asset.get("name") if isinstance(asset, dict) else asset
        if isinstance(name, str):
            names.append(name)
    return names


def compilation_from_stats(stats: dict[str, Any], public_path: str | None = None) -> Compilation:
    """
    Build a read-only Compilation from parsed stats.

    Chunk groups come from `entrypoints` and `namedChunkGroups`. Chunks outside
    every named group get an anonymous group of their own. A group's parents
    are the groups holding the parent chunks of its members.

    Args:
        stats: Parsed stats JSON
        public_path: Overrides the stats `publicPath` when given

    Returns:
        Compilation with chunks in stats order
    """
    raw_chunks = [c for c in stats.get("chunks", []) if isinstance(c, dict)]
    by_id = {str(c.get("id")): c for c in raw_chunks}

    named_groups: dict[str, Any] = {}
    named_groups.update(stats.get("entrypoints") or {})
    named_groups.update(stats.get("namedChunkGroups") or {})

    group_chunks: dict[str, tuple[str, ...]] = {
        name: tuple(str(chunk_id) for chunk_id in group.get("chunks", []))
        for name, group in named_groups.items()
    }
    membership: dict[str, list[str]] = defaultdict(list)
    for name, chunk_ids in group_chunks.items():
        for chunk_id in chunk_ids:
            membership[chunk_id].append(name)

    for chunk_id in by_id:
        if not membership[chunk_id]:
            name = f"{ANONYMOUS_GROUP_PREFIX}{chunk_id}"
            group_chunks[name] = (chunk_id,)
            membership[chunk_id].append(name)

    chunk_groups: dict[str, ChunkGroup] = {}
    for name, chunk_ids in group_chunks.items():
        parent_names: list[str] = []
        for chunk_id in chunk_ids:
            for parent_id in by_id.get(chunk_id, {}).get("parents", []):
                for parent_group in membership.get(str(parent_id), []):
                    if parent_group != name and parent_group not in parent_names:
                        parent_names.append(parent_group)
        chunk_groups[name] = ChunkGroup(name=name, chunks=chunk_ids, parents=tuple(parent_names))

    chunks: list[Chunk] = []
    for chunk_id, raw in by_id.items():
        names = raw.get("names") or []
        chunks.append(
            Chunk(
                id=chunk_id,
                files=tuple(raw.get("files", [])),
                name=names[0] if names else None,
                hash=raw.get("hash"),
                initial=bool(raw.get("initial", False)),
                parents=tuple(str(p) for p in raw.get("parents", [])),
                groups=tuple(membership[chunk_id]),
            )
        )

    if public_path is None:
        public_path = stats.get("publicPath") or ""
        # Runtime-resolved public paths can't be known ahead of time
        if public_path == "auto":
            public_path = ""

    assets = _asset_names(stats.get("assets", []))
    logger.debug(
        f"Loaded compilation with {len(chunks)} chunk(s), {len(chunk_groups)} group(s), {len(assets)} asset(s)"
    )
    return Compilation(
        chunks=chunks,
        chunk_groups=chunk_groups,
        assets=assets,
        public_path=public_path,
    )


def asset_chunks_for_entries(
    compilation: Compilation,
    entry_names: Iterable[str] | None = None,
) -> dict[str, AssetChunk]:
    """
    Describe the entry chunks an HTML document includes, the way the HTML stage reports them.

    Args:
        compilation: Compilation to read entry chunks from
        entry_names: Entries emitted into the document; all root groups when None

    Returns:
        Mapping of entry name to AssetChunk carrying the entry chunk's hash
    """
    if entry_names is None:
        entry_names = [
            name
            for name, group in compilation.chunk_groups.items()
            if group.is_root and not name.startswith(ANONYMOUS_GROUP_PREFIX)
        ]

    asset_chunks: dict[str, AssetChunk] = {}
    for name in entry_names:
        entry_chunk = next((c for c in compilation.chunks if c.name == name), None)
        if entry_chunk is None:
            group = compilation.get_chunk_group(name)
            if group is not None and group.chunks:
                entry_chunk = compilation.get_chunk(group.chunks[-1])
        if entry_chunk is None:
            logger.warning(f"Entry '{name}' not found in compilation")
            continue
        asset_chunks[name] = AssetChunk(hash=entry_chunk.hash)
    return asset_chunks
