from __future__ import annotations

import logging
from typing import Sequence

from ...domain.errors import InvalidOptionError
from ...domain.models.chunk import Chunk
from ..dto.options import ALL_ASSETS, ALL_CHUNKS, ASYNC_CHUNKS, INITIAL
from ..ports.compilation import CompilationPort

logger = logging.getLogger(__name__)

ALL_ASSETS_CHUNK_ID = "__all_assets__"


def extract_chunks(compilation: CompilationPort, include: str | Sequence[str]) -> list[Chunk]:
    """
    Select the candidate chunks for one document pass.

    Args:
        compilation: Build output to read chunks from
        include: Selection mode ("allChunks", "allAssets", "asyncChunks", "initial")
                 or a list of chunk names

    Returns:
        Candidate chunks in bundler order. In "allAssets" mode a synthetic chunk
        holding every emitted asset name is appended.

    Raises:
        InvalidOptionError: If include is not a recognized mode
    """
    chunks = list(compilation.chunks)

    if include == ALL_ASSETS:
        if not compilation.assets:
            return chunks
        return chunks + [Chunk(id=ALL_ASSETS_CHUNK_ID, files=tuple(compilation.assets))]
    if include == ALL_CHUNKS:
        return chunks
    if include == ASYNC_CHUNKS:
        return [chunk for chunk in chunks if not chunk.initial]
    if include == INITIAL:
        return [chunk for chunk in chunks if chunk.initial]
    if isinstance(include, (list, tuple)):
        names = set(include)
        return [chunk for chunk in chunks if chunk.name and chunk.name in names]

    raise InvalidOptionError(
        "include",
        include,
        hint=f"Use one of {ALL_CHUNKS}, {ALL_ASSETS}, {ASYNC_CHUNKS}, {INITIAL} or a list of chunk names",
    )
