"""Unit tests for pure domain services: type inference, serialization, head injection."""

import re

import pytest

from preload_hints.domain.models import LinkDescriptor
from preload_hints.domain.services import (
    infer_resource_type,
    insert_links_into_head,
    render_element,
)


@pytest.mark.parametrize(
    "href,expected",
    [
        ("/dist/app.js", "script"),
        ("/dist/app.mjs", "script"),
        ("/dist/app.css", "style"),
        ("/img/logo.PNG", "image"),
        ("/img/hero.webp", "image"),
        ("/fonts/inter.woff2", "font"),
        ("/fonts/inter.ttf", "font"),
        ("/media/intro.mp3", "audio"),
        ("/media/intro.webm", "video"),
        ("/frames/embed.html", "document"),
        ("/workers/sync.worker.js", "worker"),
        ("/data/manifest.json", "fetch"),
    ],
)
def test_infer_resource_type_by_extension(href, expected):
    """Test the extension table."""
    assert infer_resource_type(href) == expected


def test_infer_resource_type_ignores_query_and_fragment():
    """Test that query strings and fragments don't affect inference."""
    assert infer_resource_type("/dist/app.css?v=3.js") == "style"
    assert infer_resource_type("https://cdn.example.com/app.js#main.css") == "script"
    assert infer_resource_type("/fonts/inter.woff2?hash=abc") == "font"


def test_hash_in_file_name_is_read_as_fragment():
    """Test that a literal "#" cuts the path, matching what the browser fetches."""
    assert infer_resource_type("/font#1.woff2") is None
    assert infer_resource_type("/font%231.woff2") == "font"


def test_infer_resource_type_unknown_or_missing_extension():
    """Test that unknown or missing extensions yield None instead of a guess."""
    assert infer_resource_type("/dist/app.wasm") is None
    assert infer_resource_type("/dist/LICENSE") is None
    assert infer_resource_type("/dist/") is None


def test_render_element_void_link():
    """Test rendering a link without closing tag, attributes in insertion order."""
    rendered = render_element(
        "link",
        {"href": "/dist/app.js", "rel": "preload", "as": "script"},
        closing_tag_omitted=True,
    )
    assert rendered == '<link href="/dist/app.js" rel="preload" as="script">'


def test_render_element_with_closing_tag_and_no_attributes():
    """Test rendering of elements with a closing tag."""
    assert render_element("script") == "<script></script>"
    assert render_element("div", {"id": "root"}) == '<div id="root"></div>'


def test_render_element_keeps_values_literal():
    """Test that values are written as-is without entity escaping."""
    rendered = render_element("link", {"href": "/a.js?x=1&y=2"}, closing_tag_omitted=True)
    assert rendered == '<link href="/a.js?x=1&y=2">'


def test_rendered_link_reparses_to_same_attributes():
    """Test that a serialized descriptor parses back to the attributes it was built from."""
    link = LinkDescriptor(href="/dist/font.woff2", rel="preload", as_="font", crossorigin="anonymous")
    rendered = render_element("link", link.to_attributes(), closing_tag_omitted=True)

    parsed = dict(re.findall(r'(\w+)="([^"]*)"', rendered))
    assert parsed == {
        "href": "/dist/font.woff2",
        "rel": "preload",
        "as": "font",
        "crossorigin": "anonymous",
    }


def test_insert_links_before_closing_head():
    """Test that links are inserted as one block right before </head>."""
    html = "<html><head><title>x</title></head><body></body></html>"
    result = insert_links_into_head(html, ["<link a>", "<link b>"])

    assert result == "<html><head><title>x</title><link a><link b></head><body></body></html>"
    assert result.count("<link a><link b>") == 1


def test_insert_links_case_insensitive_first_match_only():
    """Test that the match is case-insensitive and only the first closing head tag is used."""
    html = "<HTML><HEAD></HEAD><body><template></head></template></body></HTML>"
    result = insert_links_into_head(html, ["<link x>"])

    assert result == "<HTML><HEAD><link x></HEAD><body><template></head></template></body></HTML>"


def test_insert_links_without_head_returns_document_unchanged():
    """Test that documents lacking </head> are returned as-is."""
    html = "<html><body>no head here</body></html>"
    assert insert_links_into_head(html, ["<link x>"]) == html


def test_insert_no_links_returns_document_unchanged():
    """Test that an empty link list leaves the document alone."""
    html = "<html><head></head></html>"
    assert insert_links_into_head(html, []) == html
