"""Request-scoped dependencies shared by the v1 routers."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from datavault.database import get_db
from datavault.models.user import User
from datavault.services.link_preview import LinkPreviewService

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_current_user(
    db: DbSession,
    api_key: Annotated[str, Header(alias="X-API-Key")],
) -> User:
    """Resolve the session owner; every records query is scoped to this user."""
    user = await db.scalar(select(User).where(User.api_key == api_key))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )
    return user


def get_link_preview_service(request: Request) -> LinkPreviewService:
    return request.app.state.link_preview_service


CurrentUser = Annotated[User, Depends(get_current_user)]
Previews = Annotated[LinkPreviewService, Depends(get_link_preview_service)]
