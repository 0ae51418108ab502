from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from datavault.models.base import Base

if TYPE_CHECKING:
    from datavault.models.item import Item
    from datavault.models.user import User

DEFAULT_FOLDER_COLOR = "#6366f1"
DEFAULT_FOLDER_ICON = "folder"


class Folder(Base):
    __tablename__ = "folders"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[Optional[str]] = mapped_column(String(300))
    color: Mapped[str] = mapped_column(default=DEFAULT_FOLDER_COLOR)
    icon: Mapped[str] = mapped_column(default=DEFAULT_FOLDER_ICON)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="folders")
    items: Mapped[list["Item"]] = relationship(
        "Item", back_populates="folder", passive_deletes=True
    )
