from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Response, status
from sqlalchemy import select

from datavault.api.deps import CurrentUser, DbSession, Previews
from datavault.errors import InvalidOperationError
from datavault.models import Folder, Item, ItemType
from datavault.schemas import (
    ItemCreate,
    ItemMove,
    ItemRead,
    ItemUpdate,
    ItemWithPreview,
)
from datavault.services.records import get_owned

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=list[ItemRead])
async def list_items(
    current_user: CurrentUser,
    db: DbSession,
    folder_id: Optional[UUID] = None,
) -> list[ItemRead]:
    """List the current user's items, newest first, optionally for one folder."""
    query = select(Item).where(Item.user_id == current_user.id)
    if folder_id is not None:
        query = query.where(Item.folder_id == folder_id)
    result = await db.execute(query.order_by(Item.created_at.desc(), Item.id.desc()))
    return [ItemRead.model_validate(item) for item in result.scalars().all()]


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(
    payload: ItemCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ItemRead:
    if payload.folder_id is not None:
        await get_owned(db, Folder, payload.folder_id, current_user)

    item = Item(
        user_id=current_user.id,
        folder_id=payload.folder_id,
        title=payload.title,
        description=payload.description,
        type=payload.type,
        content=payload.content,
        thumbnail_url=str(payload.thumbnail_url) if payload.thumbnail_url else None,
    )
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return ItemRead.model_validate(item)


@router.get("/{item_id}", response_model=ItemRead)
async def get_item(
    item_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> ItemRead:
    item = await get_owned(db, Item, item_id, current_user)
    return ItemRead.model_validate(item)


@router.patch("/{item_id}", response_model=ItemRead)
async def update_item(
    item_id: UUID,
    payload: ItemUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ItemRead:
    """Update an item (must belong to current user). Omitted fields are kept."""
    item = await get_owned(db, Item, item_id, current_user)

    changes = payload.model_dump(exclude_none=True)
    if "thumbnail_url" in changes:
        changes["thumbnail_url"] = str(payload.thumbnail_url)
    for field, value in changes.items():
        setattr(item, field, value)

    await db.commit()
    await db.refresh(item)
    return ItemRead.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> Response:
    item = await get_owned(db, Item, item_id, current_user)
    await db.delete(item)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{item_id}/move", response_model=ItemRead)
async def move_item(
    item_id: UUID,
    payload: ItemMove,
    current_user: CurrentUser,
    db: DbSession,
) -> ItemRead:
    """Move an item into a folder, or back to the root when ``folder_id`` is null."""
    item = await get_owned(db, Item, item_id, current_user)
    if payload.folder_id is not None:
        await get_owned(db, Folder, payload.folder_id, current_user)

    item.folder_id = payload.folder_id
    await db.commit()
    await db.refresh(item)
    return ItemRead.model_validate(item)


@router.post("/{item_id}/preview", response_model=ItemWithPreview)
async def preview_item(
    item_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
    previews: Previews,
) -> ItemWithPreview:
    """Fetch a preview for a link item and fill its empty thumbnail and description."""
    item = await get_owned(db, Item, item_id, current_user)
    if item.type != ItemType.LINK:
        raise InvalidOperationError("Only link items have previews")

    preview = await previews.fetch(item.content)
    if not item.thumbnail_url and preview.image:
        item.thumbnail_url = preview.image
    if not item.description and preview.description:
        item.description = preview.description

    await db.commit()
    await db.refresh(item)
    return ItemWithPreview(item=ItemRead.model_validate(item), preview=preview)
