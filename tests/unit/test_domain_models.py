"""Unit tests for domain models: Chunk, ChunkGroup, Compilation, LinkDescriptor."""

import pytest

from preload_hints.domain.errors import InvalidLinkDescriptor
from preload_hints.domain.models import Chunk, ChunkGroup, Compilation, LinkDescriptor


def test_chunk_normalizes_lists_to_tuples():
    """Test that list inputs are stored as tuples so chunks stay hashable."""
    chunk = Chunk(id="0", files=["main.js", "main.css"], parents=["1"], groups=["main"])

    assert chunk.files == ("main.js", "main.css")
    assert chunk.parents == ("1",)
    assert chunk.groups == ("main",)
    assert hash(chunk) == hash(Chunk(id="0", files=("main.js", "main.css"), parents=("1",), groups=("main",)))


def test_chunk_group_root_detection():
    """Test that groups without parents are entrypoints."""
    assert ChunkGroup(name="main", chunks=["0"]).is_root is True
    assert ChunkGroup(name="lazy", chunks=["2"], parents=["main"]).is_root is False


def test_compilation_lookups():
    """Test chunk and chunk group lookups, including misses."""
    main = Chunk(id="0", name="main", files=("main.js",))
    compilation = Compilation(
        chunks=[main],
        chunk_groups={"main": ChunkGroup(name="main", chunks=("0",))},
    )

    assert compilation.get_chunk("0") is main
    assert compilation.get_chunk("missing") is None
    assert compilation.get_chunk_group("main").chunks == ("0",)
    assert compilation.get_chunk_group("missing") is None
    assert compilation.errors == []


def test_link_descriptor_attribute_order():
    """Test that attributes come out as href, rel, as, crossorigin."""
    link = LinkDescriptor(href="/f.woff2", rel="preload", as_="font", crossorigin="anonymous")

    assert list(link.to_attributes().items()) == [
        ("href", "/f.woff2"),
        ("rel", "preload"),
        ("as", "font"),
        ("crossorigin", "anonymous"),
    ]


def test_link_descriptor_omits_unset_attributes():
    """Test that missing as/crossorigin are left out rather than rendered empty."""
    assert LinkDescriptor(href="/a", rel="prefetch").to_attributes() == {"href": "/a", "rel": "prefetch"}
    assert LinkDescriptor(href="/a", rel="preload").to_attributes() == {"href": "/a", "rel": "preload"}


def test_link_descriptor_rejects_as_without_preload():
    """Test that prefetch links can't carry an as attribute."""
    with pytest.raises(InvalidLinkDescriptor):
        LinkDescriptor(href="/a.js", rel="prefetch", as_="script")


def test_link_descriptor_rejects_crossorigin_for_non_fonts():
    """Test that crossorigin is only allowed on preloaded fonts."""
    with pytest.raises(InvalidLinkDescriptor):
        LinkDescriptor(href="/a.js", rel="preload", as_="script", crossorigin="anonymous")
