"""Item model"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Item(Base, TimestampMixin):
    """Item table for storing listed items"""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    category = Column(String(255), nullable=False, default="")  # Denormalized category text
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    image_name = Column(String(255), nullable=False)  # sha256 hex + ".jpg"

    # Relationships
    category_ref = relationship("Category", back_populates="items")

    def __repr__(self):
        return f"<Item(id={self.id}, name='{self.name}')>"
