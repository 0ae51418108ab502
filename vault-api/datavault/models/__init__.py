from datavault.models.base import Base
from datavault.models.folder import Folder
from datavault.models.item import Item, ItemType
from datavault.models.user import User

__all__ = ["Base", "Folder", "Item", "ItemType", "User"]
