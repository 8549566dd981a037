"""Storage services"""

from .image_store import ImageStore, image_filename
from .item_repository import ItemRepository, SqlItemRepository, JsonItemRepository

__all__ = [
    "ImageStore",
    "image_filename",
    "ItemRepository",
    "SqlItemRepository",
    "JsonItemRepository",
]
