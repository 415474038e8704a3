"""Unit tests for select_files."""

import random

from preload_hints.application.services.file_selector import select_files
from preload_hints.domain.models import Chunk
from preload_hints.domain.policy.selection_policy import SelectionPolicy


def test_select_files_deduplicates_and_sorts():
    """Test that files shared by chunks collapse and come out sorted."""
    chunks = [
        Chunk(id="0", files=("main.js", "shared.js")),
        Chunk(id="1", files=("shared.js", "about.js", "about.css")),
    ]

    assert select_files(chunks, SelectionPolicy()) == ["about.css", "about.js", "main.js", "shared.js"]


def test_select_files_order_independent_of_chunk_order():
    """Test that output is identical however the chunks are ordered."""
    chunks = [Chunk(id=str(i), files=(f"{name}.js", "common.js")) for i, name in enumerate("zebra apple mango kiwi".split())]
    expected = select_files(chunks, SelectionPolicy())

    rng = random.Random(7)
    for _ in range(10):
        shuffled = chunks[:]
        rng.shuffle(shuffled)
        assert select_files(shuffled, SelectionPolicy()) == expected

    assert expected == sorted(set(expected))


def test_select_files_applies_allow_then_deny():
    """Test allow-list and deny-list filtering."""
    chunks = [Chunk(id="0", files=("main.js", "main.js.map", "main.css", "logo.svg"))]
    policy = SelectionPolicy(allow=[r"\.js", r"\.css$"], deny=[r"\.map$"])

    assert select_files(chunks, policy) == ["main.css", "main.js"]


def test_select_files_empty_input():
    """Test that no chunks yield no files."""
    assert select_files([], SelectionPolicy()) == []
    assert select_files([Chunk(id="0")], SelectionPolicy()) == []
