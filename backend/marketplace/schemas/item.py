"""Item schemas"""

from pydantic import BaseModel
from typing import List


class ItemBase(BaseModel):
    """Base item schema"""

    name: str = ""
    category: str = ""


class ItemResponse(ItemBase):
    """Schema for item response"""

    id: int
    image_name: str

    class Config:
        from_attributes = True


class ItemCreatedResponse(ItemResponse):
    """Acknowledgement returned after an item upload"""

    message: str


class ItemListResponse(BaseModel):
    """Schema for the item listing"""

    items: List[ItemResponse] = []
