from fastapi import APIRouter

from datavault.api.v1 import folders, items, link_preview, users

api_router = APIRouter(prefix="/api")
api_router.include_router(items.router)
api_router.include_router(folders.router)
api_router.include_router(link_preview.router)
api_router.include_router(users.router)

__all__ = ["api_router"]
