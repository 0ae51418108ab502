from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from datavault.models.folder import DEFAULT_FOLDER_COLOR, DEFAULT_FOLDER_ICON

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class FolderBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=300)
    color: str = Field(default=DEFAULT_FOLDER_COLOR, pattern=HEX_COLOR)
    icon: str = Field(default=DEFAULT_FOLDER_ICON, max_length=50)


class FolderCreate(FolderBase):
    pass


class FolderUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=300)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
    icon: Optional[str] = Field(default=None, max_length=50)


class FolderRead(FolderBase):
    id: UUID
    user_id: UUID
    item_count: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
