"""Pydantic schemas for request/response validation"""

from .item import ItemResponse, ItemCreatedResponse, ItemListResponse
from .category import CategoryResponse, CategoryCreatedResponse, CategoryListResponse
from .message import MessageResponse

__all__ = [
    "ItemResponse",
    "ItemCreatedResponse",
    "ItemListResponse",
    "CategoryResponse",
    "CategoryCreatedResponse",
    "CategoryListResponse",
    "MessageResponse",
]
