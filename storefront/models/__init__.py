# SQLAlchemy 모델 패키지
from .base import Base
from .profile import Profile
from .category import Category
from .product import Product, ProductImage
from .review import Review
from .cart import CartItem, WishlistItem
from .address import Address, AddressType
from .order import Order, OrderItem, OrderNumberCounter, OrderStatus, PaymentStatus

__all__ = [
    "Base", "Profile", "Category", "Product", "ProductImage", "Review",
    "CartItem", "WishlistItem", "Address", "AddressType",
    "Order", "OrderItem", "OrderNumberCounter", "OrderStatus", "PaymentStatus",
]
