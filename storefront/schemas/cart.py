"""
장바구니 / 위시리스트 스키마
"""
from typing import List
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from .product import ProductSummary


class CartItemAdd(BaseModel):
    """장바구니 담기 스키마"""
    product_id: str = Field(..., description="상품 ID")
    quantity: int = Field(1, ge=1, description="수량")


class CartItemUpdate(BaseModel):
    """장바구니 수량 변경 스키마 (0 이하이면 삭제)"""
    quantity: int = Field(..., description="새 수량")


class CartItemResponse(BaseModel):
    """장바구니 항목 응답 스키마"""
    id: str
    product_id: str
    quantity: int
    line_total: Decimal
    product: ProductSummary

    class Config:
        from_attributes = True


class CartResponse(BaseModel):
    """장바구니 응답 스키마"""
    items: List[CartItemResponse]
    item_count: int = Field(..., description="전체 수량 합계")
    subtotal: Decimal = Field(..., description="상품 금액 합계")


class WishlistItemResponse(BaseModel):
    """위시리스트 항목 응답 스키마"""
    id: str
    product_id: str
    created_at: datetime
    product: ProductSummary

    class Config:
        from_attributes = True


class WishlistStatus(BaseModel):
    """위시리스트 포함 여부"""
    product_id: str
    in_wishlist: bool
