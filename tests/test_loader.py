"""Tests for loading markup files."""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import patch

import pytest

from yamlhtml.exceptions import MarkupSyntaxError, TemplateLoadError
from yamlhtml.loader import (
    load_page,
    load_page_async,
    load_template,
    read_source,
    read_stylesheet,
    read_stylesheet_async,
)


class TestReadSource:
    """Tests for read_source function."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        """Files are decoded as UTF-8."""
        path = tmp_path / "page.yaml"
        path.write_text('p: "héllo"', encoding="utf-8")
        assert read_source(path) == 'p: "héllo"'

    def test_missing_file(self, tmp_path: Path) -> None:
        """Unreadable files raise TemplateLoadError."""
        with pytest.raises(TemplateLoadError, match="Failed to read"):
            read_source(tmp_path / "missing.yaml")

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        """Undecodable files raise TemplateLoadError."""
        path = tmp_path / "page.yaml"
        path.write_bytes(b"p: \"\xff\xfe\"")
        with pytest.raises(TemplateLoadError):
            read_source(path)


class TestLoadTemplate:
    """Tests for load_template function."""

    def test_converts_file(self, tmp_path: Path) -> None:
        """The file's markup is rendered to HTML."""
        path = tmp_path / "page.yaml"
        path.write_text('div:\n  children:\n    - p: "hi"\n', encoding="utf-8")
        assert load_template(path) == "<div><p>hi</p></div>"

    def test_markup_errors_propagate(self, tmp_path: Path) -> None:
        """Markup errors are not wrapped."""
        path = tmp_path / "page.yaml"
        path.write_text('p: "open', encoding="utf-8")
        with pytest.raises(MarkupSyntaxError):
            load_template(path)


class TestLoadPage:
    """Tests for load_page and load_page_async functions."""

    def test_fills_page_variables(self, site_dir: Path) -> None:
        """Title defaults to the file stem and style is embedded."""
        html = load_page(site_dir / "templates" / "index.yaml", style="body{}")
        assert "<title>index</title>" in html
        assert "<style>body{}</style>" in html

    def test_explicit_title(self, site_dir: Path) -> None:
        """An explicit title wins over the file stem."""
        html = load_page(site_dir / "templates" / "index.yaml", title="Welcome")
        assert "<title>Welcome</title>" in html

    def test_source_placeholder(self, tmp_path: Path) -> None:
        """${source} receives the escaped raw markup."""
        path = tmp_path / "src.yaml"
        path.write_text('pre: "${source}"\n', encoding="utf-8")
        assert load_page(path) == "<pre>pre: &quot;${source}&quot;\n</pre>"

    @pytest.mark.asyncio
    async def test_async_matches_sync(self, site_dir: Path) -> None:
        """The async variant renders the same page."""
        path = site_dir / "templates" / "index.yaml"
        assert await load_page_async(path, style="x") == load_page(path, style="x")

    @pytest.mark.asyncio
    async def test_async_converts_in_worker_thread(self, site_dir: Path) -> None:
        """Conversion runs off the event loop."""
        path = site_dir / "templates" / "about.yml"
        with patch("asyncio.to_thread", wraps=asyncio.to_thread) as mock_to_thread:
            html = await load_page_async(path)

        assert html == '<div class="about"><p>About us</p></div>'
        assert mock_to_thread.await_args.args[0].__name__ == "_build_page"

    @pytest.mark.asyncio
    async def test_async_missing_file(self, tmp_path: Path) -> None:
        """The async variant raises TemplateLoadError too."""
        with pytest.raises(TemplateLoadError):
            await load_page_async(tmp_path / "missing.yaml")


class TestReadStylesheet:
    """Tests for read_stylesheet functions."""

    def test_reads_stylesheet(self, site_dir: Path) -> None:
        """The stylesheet text is returned."""
        assert read_stylesheet(site_dir / "static") == "body { margin: 0; }"

    def test_missing_stylesheet_is_empty(self, tmp_path: Path) -> None:
        """No stylesheet means no style."""
        assert read_stylesheet(tmp_path) == ""

    def test_custom_name(self, tmp_path: Path) -> None:
        """Another stylesheet name can be given."""
        (tmp_path / "main.css").write_text("a{}", encoding="utf-8")
        assert read_stylesheet(tmp_path, "main.css") == "a{}"

    @pytest.mark.asyncio
    async def test_async_reads_stylesheet(self, site_dir: Path) -> None:
        """The async variant reads the same text."""
        assert await read_stylesheet_async(site_dir / "static") == "body { margin: 0; }"
