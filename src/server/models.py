"""Pydantic models for the render API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from server.server_config import MAX_DEPTH_LIMIT, MAX_SOURCE_CHARS


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    source : str
        Markup text to convert.
    max_depth : int | None
        Optional nesting limit overriding the server default.

    """

    source: str = Field(..., max_length=MAX_SOURCE_CHARS, description="Markup text to convert")
    max_depth: int | None = Field(default=None, ge=1, le=MAX_DEPTH_LIMIT, description="Maximum nesting depth")


class RenderResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    html : str
        The rendered HTML fragment.

    """

    html: str


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint.

    Attributes
    ----------
    error : str
        Why the markup could not be converted.

    """

    error: str
