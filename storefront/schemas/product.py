"""
카탈로그(카테고리/상품/리뷰) 관련 스키마
"""
import enum
from typing import Any, Dict, List, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class ProductSort(str, enum.Enum):
    NAME = "name"
    PRICE_LOW = "price_low"
    PRICE_HIGH = "price_high"
    NEWEST = "newest"


class CategoryResponse(BaseModel):
    """카테고리 응답 스키마"""
    id: str
    name: str
    description: Optional[str] = None
    slug: str
    image_url: Optional[str] = None
    parent_id: Optional[str] = None
    sort_order: int = 0

    class Config:
        from_attributes = True


class ProductImageResponse(BaseModel):
    """상품 이미지 응답 스키마"""
    image_url: str
    alt_text: Optional[str] = None
    sort_order: int = 0
    is_primary: bool = False

    class Config:
        from_attributes = True


class ProductSummary(BaseModel):
    """상품 목록용 스키마"""
    id: str = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    short_description: Optional[str] = Field(None, description="짧은 설명")
    sku: Optional[str] = Field(None, description="SKU")
    price: Decimal = Field(..., description="판매 가격")
    compare_price: Optional[Decimal] = Field(None, description="정상 가격")
    category_id: Optional[str] = Field(None, description="카테고리 ID")
    is_featured: bool = False
    primary_image_url: Optional[str] = Field(None, description="대표 이미지 URL")

    class Config:
        from_attributes = True


class ProductDetail(ProductSummary):
    """상품 상세 스키마"""
    description: Optional[str] = None
    inventory_quantity: int = 0
    track_inventory: bool = True
    weight: Optional[Decimal] = None
    dimensions: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    category: Optional[CategoryResponse] = None
    images: List[ProductImageResponse] = []
    created_at: datetime
    updated_at: datetime


class ReviewCreate(BaseModel):
    """리뷰 작성 스키마"""
    rating: int = Field(..., ge=1, le=5, description="별점 (1-5)")
    title: Optional[str] = Field(None, max_length=200)
    comment: Optional[str] = None


class ReviewUpdate(BaseModel):
    """리뷰 수정 스키마"""
    rating: Optional[int] = Field(None, ge=1, le=5)
    title: Optional[str] = Field(None, max_length=200)
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """리뷰 응답 스키마"""
    id: str
    product_id: str
    user_id: str
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    is_verified: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
