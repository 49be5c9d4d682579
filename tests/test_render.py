"""Unit tests for the HTML renderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from hypa.constants import DEFAULT_TITLE
from hypa.parsing import LinkBlock, TextBlock
from hypa.render.html import (
    build_html,
    load_stylesheet,
    render_block,
    render_link,
    render_text,
)


def test_link_without_label_shows_url() -> None:
    assert '<a href="u">u</a>' in render_link("u")


def test_link_with_empty_label_shows_url() -> None:
    assert '<a href="u">u</a>' in render_link("u", "")


def test_link_with_label_shows_label() -> None:
    fragment = render_block(LinkBlock(url="http://x", label="caption"))

    assert '<a href="http://x">caption</a>' in fragment
    assert "<div>" in fragment


def test_text_is_not_escaped() -> None:
    assert render_text("a <b>bold</b> & more") == "<p>a <b>bold</b> & more</p>"


def test_render_block_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        render_block("plain string")


def test_document_concatenates_blocks_in_order() -> None:
    html = build_html((TextBlock(content="one"), TextBlock(content="two")), title="T", css="body{}")

    assert "<main><p>one</p><p>two</p></main>" in html
    assert "<title>T</title>" in html
    assert "<style>body{}</style>" in html
    assert html.lstrip().startswith("<!DOCTYPE html>")


def test_document_keeps_link_before_text() -> None:
    html = build_html((LinkBlock(url="http://a"), TextBlock(content="after")), css="")

    assert html.index('href="http://a"') < html.index("<p>after</p>")


def test_default_title_and_bundled_stylesheet() -> None:
    html = build_html(())

    assert f"<title>{DEFAULT_TITLE}</title>" in html
    assert "<main></main>" in html
    assert "max-width" in html


def test_load_stylesheet_reads_explicit_path(tmp_path: Path) -> None:
    css_path = tmp_path / "custom.css"
    css_path.write_text("p { color: red; }", encoding="utf-8")

    assert load_stylesheet(css_path) == "p { color: red; }"


def test_missing_stylesheet_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_stylesheet(tmp_path / "missing.css")
