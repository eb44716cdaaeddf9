"""Render endpoint for the API."""

import asyncio
from typing import Union

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.models import RenderErrorResponse, RenderRequest, RenderResponse
from yamlhtml.exceptions import MarkupError
from yamlhtml.rendering import convert
from yamlhtml.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/api/render",
    response_model=RenderResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse}},
)
async def api_render(render_request: RenderRequest) -> Union[RenderResponse, JSONResponse]:  # noqa: FA100 (pydantic)
    """Convert a markup document to an HTML fragment.

    **Parameters**

    - **render_request** (`RenderRequest`): markup source and optional nesting limit

    **Returns**

    - **RenderResponse**: the rendered HTML fragment
    - **JSONResponse**: **400** with an ``error`` message if the markup is invalid

    """
    try:
        html_text = await asyncio.to_thread(
            convert, render_request.source, max_depth=render_request.max_depth
        )
    except MarkupError as exc:
        logger.warning("Markup rejected", extra={"error": str(exc)})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=RenderErrorResponse(error=str(exc)).model_dump(),
        )
    return RenderResponse(html=html_text)
