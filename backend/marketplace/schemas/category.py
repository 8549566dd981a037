"""Category schemas"""

from pydantic import BaseModel
from typing import List


class CategoryResponse(BaseModel):
    """Schema for category response"""

    id: int
    name: str

    class Config:
        from_attributes = True


class CategoryCreatedResponse(CategoryResponse):
    """Acknowledgement returned after creating a category"""

    message: str


class CategoryListResponse(BaseModel):
    """Schema for the category listing"""

    categories: List[CategoryResponse] = []
