"""Storage dependencies for FastAPI"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from ..config import settings
from ..services.image_store import ImageStore
from ..services.item_repository import ItemRepository, JsonItemRepository, SqlItemRepository


@lru_cache
def _json_repository(path: str) -> JsonItemRepository:
    # One instance per file so its lock is shared across requests
    return JsonItemRepository(path)


def get_item_repository(db: Session = Depends(get_db)) -> ItemRepository:
    """
    Repository for the configured STORAGE_BACKEND

    Args:
        db: Database session (unused by the JSON backend)

    Returns:
        Item repository bound to this request
    """
    if settings.STORAGE_BACKEND == "json":
        return _json_repository(settings.ITEMS_JSON_PATH)
    return SqlItemRepository(db)


def get_image_store() -> ImageStore:
    """Image store rooted at IMAGE_DIR"""
    return ImageStore(settings.IMAGE_DIR, settings.DEFAULT_IMAGE)
