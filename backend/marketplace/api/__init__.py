"""API routes"""

from fastapi import APIRouter
from .items import router as items_router
from .categories import router as categories_router
from .images import router as images_router

api_router = APIRouter()

api_router.include_router(items_router, prefix="/items", tags=["items"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(images_router, prefix="/image", tags=["images"])
