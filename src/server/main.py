"""FastAPI application serving markup pages and static assets."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from server.routers import pages_router, render_router
from yamlhtml.config import YAMLHTML_INDEX_PAGE, YAMLHTML_STATIC_DIR, YAMLHTML_TEMPLATES_DIR


def create_app(
    *,
    templates_dir: Path | None = None,
    static_dir: Path | None = None,
    index_page: str = YAMLHTML_INDEX_PAGE,
) -> FastAPI:
    """Build the application.

    Args:
        templates_dir: Directory of markup pages. Defaults to the configured one.
        static_dir: Directory served under ``/static``. Defaults to the configured one.
        index_page: Page name served at ``/``.
    """
    app = FastAPI(title="yamlhtml", docs_url=None, redoc_url=None)
    app.state.templates_dir = templates_dir or YAMLHTML_TEMPLATES_DIR
    app.state.static_dir = static_dir or YAMLHTML_STATIC_DIR
    app.state.index_page = index_page

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(render_router)
    app.mount("/static", StaticFiles(directory=app.state.static_dir, check_dir=False), name="static")
    app.include_router(pages_router)
    return app


app = create_app()
