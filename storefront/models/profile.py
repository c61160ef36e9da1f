"""
사용자 프로필 모델
"""
from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"

    # 외부 인증 서비스의 사용자 ID
    id = Column(String(36), primary_key=True)
    email = Column(String, nullable=False)
    full_name = Column(String)
    avatar_url = Column(String)
    phone = Column(String)
    address = Column(String)
    city = Column(String)
    postal_code = Column(String)
    country = Column(String, default="United States")
    is_admin = Column(Boolean, default=False, nullable=False)

    addresses = relationship("Address", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)
    orders = relationship("Order", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)
    cart_items = relationship("CartItem", cascade="all, delete-orphan", passive_deletes=True)
    wishlist_items = relationship("WishlistItem", cascade="all, delete-orphan", passive_deletes=True)
    reviews = relationship("Review", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Profile(id='{self.id}', email='{self.email}')>"
