"""
상품 모델
"""
from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, generate_uuid, utcnow


class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    description = Column(Text)
    short_description = Column(String)
    sku = Column(String, unique=True, index=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    compare_price = Column(Numeric(10, 2))
    cost_price = Column(Numeric(10, 2))
    category_id = Column(String(36), ForeignKey("categories.id"), index=True)
    inventory_quantity = Column(Integer, default=0, nullable=False)
    track_inventory = Column(Boolean, default=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    is_featured = Column(Boolean, default=False, nullable=False, index=True)
    weight = Column(Numeric(8, 2))
    dimensions = Column(JSON)
    meta_title = Column(String)
    meta_description = Column(Text)
    tags = Column(JSON)

    category = relationship("Category")
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.sort_order",
    )

    @property
    def primary_image_url(self):
        for image in self.images:
            if image.is_primary:
                return image.image_url
        return self.images[0].image_url if self.images else None

    def __repr__(self):
        return f"<Product(id='{self.id}', sku='{self.sku}', name='{self.name}')>"


class ProductImage(Base):
    __tablename__ = "product_images"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    image_url = Column(String, nullable=False)
    alt_text = Column(String)
    sort_order = Column(Integer, default=0, nullable=False)
    is_primary = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    product = relationship("Product", back_populates="images")
