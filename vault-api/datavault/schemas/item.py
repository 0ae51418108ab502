from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from datavault.models.item import ItemType
from datavault.schemas.preview import LinkPreview


class ItemBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    type: ItemType
    content: str = Field(min_length=1, max_length=2000)
    thumbnail_url: Optional[HttpUrl] = None
    folder_id: Optional[UUID] = None


class ItemCreate(ItemBase):
    pass


class ItemUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    type: Optional[ItemType] = None
    content: Optional[str] = Field(default=None, min_length=1, max_length=2000)
    thumbnail_url: Optional[HttpUrl] = None


class ItemMove(BaseModel):
    folder_id: Optional[UUID] = None


class ItemRead(ItemBase):
    id: UUID
    user_id: UUID
    thumbnail_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ItemWithPreview(BaseModel):
    item: ItemRead
    preview: LinkPreview
