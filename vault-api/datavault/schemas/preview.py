from typing import Literal, Optional

from pydantic import BaseModel


class LinkPreview(BaseModel):
    """Best-effort page metadata. Only ``domain`` and ``url`` are guaranteed."""

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    domain: str
    url: str


class LinkPreviewRequest(BaseModel):
    url: Optional[str] = None


class LinkPreviewResponse(BaseModel):
    success: Literal[True] = True
    data: LinkPreview


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
