# Pydantic 스키마 패키지
from .common import PaginationResponse, SuccessResponse
from .product import (
    ProductSort, CategoryResponse, ProductImageResponse, ProductSummary, ProductDetail,
    ReviewCreate, ReviewUpdate, ReviewResponse,
)
from .cart import CartItemAdd, CartItemUpdate, CartItemResponse, CartResponse, WishlistItemResponse, WishlistStatus
from .address import AddressBase, AddressCreate, AddressUpdate, AddressResponse, AddressSnapshot
from .order import (
    PaymentMethod, OrderItemCreate, OrderCreate, OrderStatusUpdate, OrderItemResponse, OrderResponse,
    CheckoutSummary, CheckoutRequest,
)
from .profile import ProfileUpdate, ProfileResponse

__all__ = [
    "PaginationResponse", "SuccessResponse",
    "ProductSort", "CategoryResponse", "ProductImageResponse", "ProductSummary", "ProductDetail",
    "ReviewCreate", "ReviewUpdate", "ReviewResponse",
    "CartItemAdd", "CartItemUpdate", "CartItemResponse", "CartResponse", "WishlistItemResponse", "WishlistStatus",
    "AddressBase", "AddressCreate", "AddressUpdate", "AddressResponse", "AddressSnapshot",
    "PaymentMethod", "OrderItemCreate", "OrderCreate", "OrderStatusUpdate", "OrderItemResponse", "OrderResponse",
    "CheckoutSummary", "CheckoutRequest",
    "ProfileUpdate", "ProfileResponse",
]
