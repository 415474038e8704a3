from __future__ import annotations

from typing import Iterable

from ...domain.models.chunk import Chunk
from ...domain.policy.selection_policy import SelectionPolicy


def select_files(chunks: Iterable[Chunk], policy: SelectionPolicy) -> list[str]:
    """
    Flatten chunks to a deduplicated, filtered and sorted list of file paths.

    Sorting keeps tag order stable across runs regardless of set iteration order.
    """
    all_files = [file for chunk in chunks for file in chunk.files]
    unique_files = set(all_files)
    allowed = [file for file in unique_files if policy.is_allowed(file)]
    kept = [file for file in allowed if not policy.is_denied(file)]
    return sorted(kept)
