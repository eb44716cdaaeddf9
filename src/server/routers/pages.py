"""Page endpoints: markup templates rendered to full HTML pages."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from server.server_config import CACHE_CONTROL
from yamlhtml.config import MARKUP_SUFFIXES
from yamlhtml.exceptions import YamlHtmlError
from yamlhtml.loader import load_page_async, read_stylesheet_async
from yamlhtml.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> Response:
    """Serve the index page."""
    return await _serve_page(request, request.app.state.index_page)


@router.get("/{page}", response_class=HTMLResponse)
async def page(request: Request, page: str) -> Response:
    """Serve ``<templates>/<page>.yaml``; a trailing ``.html`` is accepted.

    **Raises**

    - **HTTPException**: **403** - the page resolves outside the templates directory
    - **HTTPException**: **404** - no markup file exists for the page

    """
    return await _serve_page(request, page.removesuffix(".html"))


async def _serve_page(request: Request, name: str) -> Response:
    path = resolve_page(request.app.state.templates_dir, name)

    try:
        style = await read_stylesheet_async(request.app.state.static_dir)
        html_text = await load_page_async(path, style=style)
    except YamlHtmlError as exc:
        logger.error("Page rendering failed", extra={"page": name, "error": str(exc)})
        return PlainTextResponse(
            f"Failed to load template: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info("Page served", extra={"page": name})
    return HTMLResponse(html_text, headers={"Cache-Control": CACHE_CONTROL})


def resolve_page(templates_dir: Path, name: str) -> Path:
    """Find the markup file for a page name inside ``templates_dir``."""
    root = templates_dir.resolve()
    for suffix in MARKUP_SUFFIXES:
        candidate = (root / f"{name}{suffix}").resolve()
        if not candidate.is_relative_to(root):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Invalid page: {name!r}")
        if candidate.is_file():
            return candidate
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Page {name!r} not found")
