"""Build a static site: every markup page in a directory rendered to HTML."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from bs4 import BeautifulSoup

from yamlhtml.config import MARKUP_SUFFIXES
from yamlhtml.exceptions import BuildError
from yamlhtml.io_utils import copy_tree_async, mkdir_async, remove_tree_async, write_text_async
from yamlhtml.loader import load_page_async, read_stylesheet_async

logger = logging.getLogger(__name__)

STATIC_SUBDIR = "static"


def find_pages(source_dir: Path) -> list[Path]:
    """Markup files directly inside ``source_dir``, sorted by name."""
    return sorted(
        path for path in source_dir.iterdir() if path.is_file() and path.suffix in MARKUP_SUFFIXES
    )


def prettify(html_text: str) -> str:
    """Re-indent an HTML document for readability."""
    return BeautifulSoup(html_text, "html.parser").prettify()


async def build_site(
    source_dir: Path,
    output_dir: Path,
    *,
    static_dir: Path | None = None,
    pretty: bool = False,
    clean: bool = True,
) -> list[Path]:
    """Render every markup page in ``source_dir`` into ``output_dir``.

    Static files are copied to ``output_dir/static`` and the stylesheet
    found there is embedded into each page as ``${style}``.

    Args:
        source_dir: Directory holding ``*.yaml`` / ``*.yml`` pages.
        output_dir: Directory receiving ``<name>.html`` files.
        static_dir: Optional directory of static assets.
        pretty: If True, re-indent the generated HTML.
        clean: If True, delete ``output_dir`` before building.

    Returns:
        Paths of the written HTML pages, in page-name order.

    Raises:
        BuildError: If the directories are unusable.
        MarkupError: If any page fails to parse; nothing partial is reported
            as success.
    """
    if not source_dir.is_dir():
        raise BuildError(f"Source directory not found: {source_dir}")

    resolved_output = output_dir.resolve()
    if resolved_output == source_dir.resolve() or resolved_output in source_dir.resolve().parents:
        raise BuildError(f"Output directory {output_dir} would overwrite source directory {source_dir}")

    if clean and output_dir.exists():
        await remove_tree_async(output_dir)
    await mkdir_async(output_dir, parents=True, exist_ok=True)

    style = ""
    if static_dir is not None and static_dir.is_dir():
        await copy_tree_async(static_dir, output_dir / STATIC_SUBDIR)
        style = await read_stylesheet_async(static_dir)

    pages = find_pages(source_dir)
    written = await asyncio.gather(
        *(_build_page(page, output_dir, style=style, pretty=pretty) for page in pages)
    )

    logger.info(
        "Static build completed",
        extra={"source_dir": str(source_dir), "output_dir": str(output_dir), "pages": len(written)},
    )
    return list(written)


async def _build_page(page: Path, output_dir: Path, *, style: str, pretty: bool) -> Path:
    html_text = await load_page_async(page, style=style)
    if pretty:
        html_text = prettify(html_text)

    destination = output_dir / f"{page.stem}.html"
    await write_text_async(destination, html_text)
    logger.debug("Built page", extra={"page": str(page), "output": str(destination)})
    return destination
