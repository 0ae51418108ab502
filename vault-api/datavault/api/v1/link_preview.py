from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from datavault.api.deps import get_link_preview_service
from datavault.schemas import ErrorResponse, LinkPreviewRequest, LinkPreviewResponse
from datavault.services.link_preview import LinkPreviewService

logger = structlog.get_logger(logger_name=__name__)

router = APIRouter(prefix="/link-preview", tags=["link-preview"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "",
    response_model=LinkPreviewResponse,
    response_model_exclude_none=True,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": LinkPreviewRequest.model_json_schema()}
            },
        }
    },
)
async def fetch_link_preview(
    request: Request,
    previews: Annotated[LinkPreviewService, Depends(get_link_preview_service)],
) -> LinkPreviewResponse | JSONResponse:
    """Return title, description and image for a URL.

    Unreachable or non-HTML pages still answer 200 with only ``domain`` and
    ``url`` set; only a missing URL (400) or an internal fault (500) fail.
    """
    try:
        payload = LinkPreviewRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        payload = LinkPreviewRequest()

    if not payload.url or not payload.url.strip():
        return _error(status.HTTP_400_BAD_REQUEST, "URL is required")

    try:
        preview = await previews.fetch(payload.url)
    except Exception as exc:
        logger.exception("link_preview_error", url=payload.url)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Failed to fetch preview",
        )

    return LinkPreviewResponse(data=preview)
