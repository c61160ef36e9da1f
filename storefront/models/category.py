"""
카테고리 모델
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from .base import Base, generate_uuid, utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text)
    slug = Column(String, unique=True, nullable=False, index=True)
    image_url = Column(String)
    parent_id = Column(String(36), ForeignKey("categories.id"))
    sort_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Category(id='{self.id}', slug='{self.slug}')>"
