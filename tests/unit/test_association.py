"""Unit tests for chunk-to-document association variants."""

import pytest

from preload_hints.application.services.association import (
    ASSOCIATION_VARIANTS,
    BuildVersion,
    belongs_to_html_v3,
    belongs_to_html_v4,
    does_chunk_belong_to_html,
)
from preload_hints.domain.errors import UnsupportedBuildVersion
from preload_hints.domain.models import AssetChunk, Chunk, ChunkGroup, Compilation


@pytest.fixture
def compilation() -> Compilation:
    """Two entries (main, admin); lazy is split from main, nested is split from lazy."""
    return Compilation(
        chunks=[
            Chunk(id="0", name="main", files=("main.js",), hash="h0", initial=True, groups=("main",)),
            Chunk(id="1", files=("vendors.js",), hash="h1", initial=True, groups=("main",)),
            Chunk(id="2", name="lazy", files=("lazy.js",), hash="h2", parents=("0",), groups=("lazy",)),
            Chunk(id="3", name="nested", files=("nested.js",), hash="h3", parents=("2",), groups=("nested",)),
            Chunk(id="4", name="admin", files=("admin.js",), hash="h4", initial=True, groups=("admin",)),
        ],
        chunk_groups={
            "main": ChunkGroup(name="main", chunks=("0", "1")),
            "lazy": ChunkGroup(name="lazy", chunks=("2",), parents=("main",)),
            "nested": ChunkGroup(name="nested", chunks=("3",), parents=("lazy",)),
            "admin": ChunkGroup(name="admin", chunks=("4",)),
        },
    )


@pytest.fixture
def main_document_chunks() -> dict[str, AssetChunk]:
    return {"main": AssetChunk(hash="h0")}


def test_build_version_parse_accepts_known_identifiers():
    """Test parsing of supported identifiers."""
    assert BuildVersion.parse("v3") is BuildVersion.V3
    assert BuildVersion.parse("v4") is BuildVersion.V4
    assert BuildVersion.parse(BuildVersion.V4) is BuildVersion.V4


def test_build_version_parse_rejects_unknown_identifier():
    """Test that unknown identifiers fail with a message naming the supported set."""
    with pytest.raises(UnsupportedBuildVersion) as exc_info:
        BuildVersion.parse("v9")

    assert exc_info.value.supported == ["v3", "v4"]
    assert "v3, v4" in str(exc_info.value)


def test_every_version_has_a_variant():
    """Test that dispatch covers every supported version."""
    assert set(ASSOCIATION_VARIANTS) == set(BuildVersion)


def test_v4_follows_chunk_groups_to_entrypoints(compilation, main_document_chunks):
    """Test v4 association through chunk group ancestry."""
    belongs = {
        chunk.id: belongs_to_html_v4(chunk, compilation, main_document_chunks)
        for chunk in compilation.chunks
    }

    assert belongs == {"0": True, "1": True, "2": True, "3": True, "4": False}


def test_v3_follows_parent_chunks_to_document_hashes(compilation, main_document_chunks):
    """Test v3 association through parent chunk hashes."""
    belongs = {
        chunk.id: belongs_to_html_v3(chunk, compilation, main_document_chunks)
        for chunk in compilation.chunks
    }

    # vendors shares the entry group but not the entry chunk's lineage
    assert belongs == {"0": True, "1": False, "2": True, "3": True, "4": False}


def test_v3_without_document_hashes_matches_nothing(compilation):
    """Test that documents reporting no chunk hashes match no chunk."""
    chunk = compilation.get_chunk("0")
    assert belongs_to_html_v3(chunk, compilation, {"main": AssetChunk()}) is False


def test_variants_terminate_on_cycles():
    """Test that cyclic parent links don't loop forever."""
    compilation = Compilation(
        chunks=[
            Chunk(id="a", hash="ha", parents=("b",), groups=("ga",)),
            Chunk(id="b", hash="hb", parents=("a",), groups=("gb",)),
        ],
        chunk_groups={
            "ga": ChunkGroup(name="ga", chunks=("a",), parents=("gb",)),
            "gb": ChunkGroup(name="gb", chunks=("b",), parents=("ga",)),
        },
    )
    document = {"main": AssetChunk(hash="h-main")}
    chunk = compilation.get_chunk("a")

    assert belongs_to_html_v3(chunk, compilation, document) is False
    assert belongs_to_html_v4(chunk, compilation, document) is False


def test_v4_unknown_group_counts_as_its_own_entrypoint():
    """Test that groups missing from the compilation are matched by name."""
    chunk = Chunk(id="0", groups=("main",))
    assert belongs_to_html_v4(chunk, Compilation(chunks=[chunk]), {"main": AssetChunk()}) is True


def test_dispatch_uses_selected_variant(compilation, main_document_chunks):
    """Test that dispatch routes to the variant for the version."""
    vendors = compilation.get_chunk("1")

    assert does_chunk_belong_to_html(BuildVersion.V4, vendors, compilation, main_document_chunks) is True
    assert does_chunk_belong_to_html(BuildVersion.V3, vendors, compilation, main_document_chunks) is False
