from uuid import UUID

from fastapi import APIRouter, Response, status
from sqlalchemy import select

from datavault.api.deps import CurrentUser, DbSession
from datavault.models import Folder
from datavault.schemas import FolderCreate, FolderRead, FolderUpdate
from datavault.services.records import (
    folder_item_counts,
    get_owned,
    release_folder_items,
)

router = APIRouter(prefix="/folders", tags=["folders"])


@router.get("", response_model=list[FolderRead])
async def list_folders(
    current_user: CurrentUser,
    db: DbSession,
) -> list[FolderRead]:
    """List the current user's folders, newest first, with item counts."""
    result = await db.execute(
        select(Folder)
        .where(Folder.user_id == current_user.id)
        .order_by(Folder.created_at.desc(), Folder.id.desc())
    )
    counts = await folder_item_counts(db, current_user)
    return [
        FolderRead.model_validate(folder).model_copy(
            update={"item_count": counts.get(folder.id, 0)}
        )
        for folder in result.scalars().all()
    ]


@router.post("", response_model=FolderRead, status_code=status.HTTP_201_CREATED)
async def create_folder(
    payload: FolderCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> FolderRead:
    folder = Folder(user_id=current_user.id, **payload.model_dump())
    db.add(folder)
    await db.commit()
    await db.refresh(folder)
    return FolderRead.model_validate(folder)


@router.patch("/{folder_id}", response_model=FolderRead)
async def update_folder(
    folder_id: UUID,
    payload: FolderUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> FolderRead:
    """Rename, recolor or re-describe a folder."""
    folder = await get_owned(db, Folder, folder_id, current_user)
    for field, value in payload.model_dump(exclude_none=True).items():
        setattr(folder, field, value)

    await db.commit()
    await db.refresh(folder)
    counts = await folder_item_counts(db, current_user)
    return FolderRead.model_validate(folder).model_copy(
        update={"item_count": counts.get(folder.id, 0)}
    )


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(
    folder_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> Response:
    """Delete a folder; its items are kept and moved to the root."""
    folder = await get_owned(db, Folder, folder_id, current_user)
    await release_folder_items(db, folder)
    await db.delete(folder)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
