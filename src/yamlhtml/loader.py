"""Load markup files from disk and turn them into HTML pages."""

from __future__ import annotations

import asyncio
from pathlib import Path

from yamlhtml.config import YAMLHTML_STYLESHEET
from yamlhtml.exceptions import TemplateLoadError
from yamlhtml.io_utils import read_text_async
from yamlhtml.page import render_page
from yamlhtml.rendering import convert


def read_source(path: Path) -> str:
    """Read a UTF-8 file.

    Raises:
        TemplateLoadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(f"Failed to read {path}: {exc}") from exc


async def read_source_async(path: Path) -> str:
    """Async variant of :func:`read_source`."""
    try:
        return await read_text_async(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(f"Failed to read {path}: {exc}") from exc


def load_template(path: Path) -> str:
    """Read a markup file and return its HTML fragment."""
    return convert(read_source(path))


def load_page(path: Path, *, style: str = "", title: str | None = None) -> str:
    """Read a markup file and return the full page with page variables filled in.

    The title defaults to the file name without its suffix and ``${source}``
    receives the raw markup text.
    """
    return _build_page(path, read_source(path), style=style, title=title)


async def load_page_async(path: Path, *, style: str = "", title: str | None = None) -> str:
    """Async variant of :func:`load_page`; conversion runs in a worker thread."""
    source = await read_source_async(path)
    return await asyncio.to_thread(_build_page, path, source, style=style, title=title)


def _build_page(path: Path, source: str, *, style: str, title: str | None) -> str:
    return render_page(
        convert(source),
        title=path.stem if title is None else title,
        style=style,
        source=source,
    )


def stylesheet_path(static_dir: Path, name: str = YAMLHTML_STYLESHEET) -> Path:
    return static_dir / name


def read_stylesheet(static_dir: Path, name: str = YAMLHTML_STYLESHEET) -> str:
    """Return the stylesheet text, or an empty string when there is none."""
    path = stylesheet_path(static_dir, name)
    if not path.is_file():
        return ""
    return read_source(path)


async def read_stylesheet_async(static_dir: Path, name: str = YAMLHTML_STYLESHEET) -> str:
    """Async variant of :func:`read_stylesheet`."""
    path = stylesheet_path(static_dir, name)
    if not path.is_file():
        return ""
    return await read_source_async(path)
