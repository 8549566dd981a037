"""Database models"""

from .category import Category
from .item import Item

__all__ = [
    "Category",
    "Item",
]
