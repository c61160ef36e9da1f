"""
카탈로그 관련 API 엔드포인트
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import structlog

from storefront.api.deps import get_current_profile, integrity_conflict, to_http_exception
from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.models.profile import Profile
from storefront.services.product_service import ProductService
from storefront.services.review_service import ReviewService
from storefront.schemas.common import PaginationResponse
from storefront.schemas.product import (
    CategoryResponse, ProductDetail, ProductSort, ProductSummary,
    ReviewCreate, ReviewResponse, ReviewUpdate,
)

logger = structlog.get_logger()

router = APIRouter()

@router.get("/categories", response_model=List[CategoryResponse])
async def get_categories(
    home: bool = Query(False, description="홈 화면용 (sort_order 순, 개수 제한)"),
    db: Session = Depends(get_db)
):
    """활성 카테고리 목록"""
    logger.info("Get categories request", home=home)

    product_service = ProductService(db)

    try:
        if home:
            return product_service.get_home_categories()
        return product_service.get_active_categories()

    except Exception as e:
        logger.error("Failed to get categories", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load categories")

@router.get("/products", response_model=PaginationResponse[ProductSummary])
async def get_products(
    page: int = Query(1, ge=1, description="페이지 번호"),
    size: int = Query(20, ge=1, le=100, description="페이지당 항목 수"),
    search: Optional[str] = Query(None, description="이름/설명 검색어"),
    category_id: Optional[str] = Query(None, description="카테고리 필터"),
    sort: ProductSort = Query(ProductSort.NAME, description="정렬 (name, price_low, price_high, newest)"),
    db: Session = Depends(get_db)
):
    """상품 목록 조회 (검색, 필터, 정렬, 페이징)"""
    logger.info("Get products request", page=page, size=size, search=search, category_id=category_id, sort=sort.value)

    product_service = ProductService(db)

    try:
        products, total = product_service.search_products(
            search=search, category_id=category_id, sort=sort, page=page, size=size
        )
        data = [ProductSummary.model_validate(product) for product in products]
        return PaginationResponse[ProductSummary].build(data, page=page, size=size, total=total)

    except Exception as e:
        logger.error("Failed to get products", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load products")

@router.get("/products/featured", response_model=List[ProductSummary])
async def get_featured_products(db: Session = Depends(get_db)):
    """추천 상품 목록"""
    logger.info("Get featured products request")

    product_service = ProductService(db)

    try:
        return product_service.get_featured_products()

    except Exception as e:
        logger.error("Failed to get featured products", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load featured products")

@router.get("/products/{product_id}", response_model=ProductDetail)
async def get_product(product_id: str, db: Session = Depends(get_db)):
    """상품 상세 조회"""
    logger.info("Get product detail", product_id=product_id)

    product_service = ProductService(db)

    try:
        product = product_service.get_product(product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")

        return product

    except HTTPException:
        raise
    except Exception as e:
        logger.error("Failed to get product detail", product_id=product_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load product")

@router.get("/products/{product_id}/reviews", response_model=List[ReviewResponse])
async def get_product_reviews(product_id: str, db: Session = Depends(get_db)):
    """승인된 상품 리뷰 목록"""
    logger.info("Get product reviews", product_id=product_id)

    try:
        return ReviewService(db).get_approved_reviews(product_id)

    except Exception as e:
        logger.error("Failed to get product reviews", product_id=product_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load reviews")

@router.post("/products/{product_id}/reviews", response_model=ReviewResponse, status_code=201)
async def create_product_review(
    product_id: str,
    review: ReviewCreate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """리뷰 작성"""
    logger.info("Create review request", product_id=product_id, user_id=profile.id)

    try:
        created = ReviewService(db).create_review(profile.id, product_id, review.model_dump())
        logger.info("Review created successfully", review_id=created.id)
        return created

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to create review", product_id=product_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create review")

@router.put("/reviews/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    review_update: ReviewUpdate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """본인 리뷰 수정"""
    logger.info("Update review request", review_id=review_id, user_id=profile.id)

    try:
        return ReviewService(db).update_review(profile.id, review_id, review_update.model_dump(exclude_unset=True))

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to update review", review_id=review_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update review")
