from datavault.schemas.folder import FolderCreate, FolderRead, FolderUpdate
from datavault.schemas.item import (
    ItemCreate,
    ItemMove,
    ItemRead,
    ItemUpdate,
    ItemWithPreview,
)
from datavault.schemas.preview import (
    ErrorResponse,
    LinkPreview,
    LinkPreviewRequest,
    LinkPreviewResponse,
)
from datavault.schemas.user import UserCreate, UserRead, UserWithApiKey

__all__ = [
    "ErrorResponse",
    "FolderCreate",
    "FolderRead",
    "FolderUpdate",
    "ItemCreate",
    "ItemMove",
    "ItemRead",
    "ItemUpdate",
    "ItemWithPreview",
    "LinkPreview",
    "LinkPreviewRequest",
    "LinkPreviewResponse",
    "UserCreate",
    "UserRead",
    "UserWithApiKey",
]
