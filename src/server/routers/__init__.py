"""Routers for the server."""

from server.routers.pages import router as pages_router
from server.routers.render import router as render_router

__all__ = ["pages_router", "render_router"]
