"""Owner-scoped record access.

Every lookup is filtered by the requesting user, so a record that belongs to
someone else is indistinguishable from one that does not exist.
"""

from typing import TypeVar
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from datavault.errors import NotFoundError
from datavault.models import Folder, Item, User

RecordT = TypeVar("RecordT", Folder, Item)


async def get_owned(
    db: AsyncSession, model: type[RecordT], record_id: UUID, owner: User
) -> RecordT:
    result = await db.execute(
        select(model).where(model.id == record_id, model.user_id == owner.id)
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise NotFoundError(f"{model.__name__} not found")
    return record


async def folder_item_counts(db: AsyncSession, owner: User) -> dict[UUID, int]:
    result = await db.execute(
        select(Item.folder_id, func.count(Item.id))
        .where(Item.user_id == owner.id, Item.folder_id.is_not(None))
        .group_by(Item.folder_id)
    )
    return {folder_id: count for folder_id, count in result.all()}


async def release_folder_items(db: AsyncSession, folder: Folder) -> None:
    """Move every item in *folder* back to the root."""
    await db.execute(
        update(Item)
        .where(Item.folder_id == folder.id, Item.user_id == folder.user_id)
        .values(folder_id=None)
    )
