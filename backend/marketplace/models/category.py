"""Category model"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """Category table; names are not unique"""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    # Relationships
    items = relationship("Item", back_populates="category_ref")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
