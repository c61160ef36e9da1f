"""
장바구니 / 위시리스트 API 엔드포인트
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import structlog

from storefront.api.deps import get_current_profile, integrity_conflict, to_http_exception
from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.models.profile import Profile
from storefront.services.cart_service import CartService, WishlistService
from storefront.schemas.cart import (
    CartItemAdd, CartItemResponse, CartItemUpdate, CartResponse, WishlistItemResponse, WishlistStatus,
)
from storefront.schemas.common import SuccessResponse

logger = structlog.get_logger()

router = APIRouter()
wishlist_router = APIRouter()

@router.get("/", response_model=CartResponse)
async def get_cart(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """장바구니 조회"""
    logger.info("Get cart request", user_id=profile.id)

    try:
        return CartService(db).get_cart(profile.id)

    except Exception as e:
        logger.error("Failed to get cart", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load cart")

@router.post("/items", response_model=CartItemResponse, status_code=201)
async def add_cart_item(
    item: CartItemAdd,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """장바구니 담기 (이미 있으면 수량 증가)"""
    logger.info("Add cart item request", user_id=profile.id, product_id=item.product_id, quantity=item.quantity)

    try:
        return CartService(db).add_item(profile.id, item.product_id, item.quantity)

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to add cart item", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to add item to cart")

@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    item_update: CartItemUpdate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """장바구니 수량 변경 (0 이하이면 삭제)"""
    logger.info("Update cart item request", user_id=profile.id, product_id=product_id, quantity=item_update.quantity)

    cart_service = CartService(db)

    try:
        cart_service.update_quantity(profile.id, product_id, item_update.quantity)
        return cart_service.get_cart(profile.id)

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to update cart item", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update cart")

@router.delete("/items/{product_id}", response_model=SuccessResponse)
async def remove_cart_item(
    product_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """장바구니 항목 삭제"""
    logger.info("Remove cart item request", user_id=profile.id, product_id=product_id)

    if not CartService(db).remove_item(profile.id, product_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return SuccessResponse(message="Item removed from cart")

@router.delete("/", response_model=SuccessResponse)
async def clear_cart(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """장바구니 비우기"""
    logger.info("Clear cart request", user_id=profile.id)

    removed = CartService(db).clear_cart(profile.id)
    return SuccessResponse(message=f"Removed {removed} item(s) from cart")

@wishlist_router.get("/", response_model=List[WishlistItemResponse])
async def get_wishlist(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """위시리스트 조회"""
    logger.info("Get wishlist request", user_id=profile.id)

    try:
        return WishlistService(db).get_wishlist(profile.id)

    except Exception as e:
        logger.error("Failed to get wishlist", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load wishlist")

@wishlist_router.get("/{product_id}", response_model=WishlistStatus)
async def get_wishlist_status(
    product_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """상품의 위시리스트 포함 여부"""
    in_wishlist = WishlistService(db).is_in_wishlist(profile.id, product_id)
    return WishlistStatus(product_id=product_id, in_wishlist=in_wishlist)

@wishlist_router.post("/{product_id}/toggle", response_model=WishlistStatus)
async def toggle_wishlist(
    product_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """위시리스트 토글"""
    logger.info("Toggle wishlist request", user_id=profile.id, product_id=product_id)

    try:
        in_wishlist = WishlistService(db).toggle(profile.id, product_id)
        return WishlistStatus(product_id=product_id, in_wishlist=in_wishlist)

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to toggle wishlist", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update wishlist")

@wishlist_router.delete("/{product_id}", response_model=SuccessResponse)
async def remove_wishlist_item(
    product_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """위시리스트 삭제"""
    logger.info("Remove wishlist item request", user_id=profile.id, product_id=product_id)

    if not WishlistService(db).remove_item(profile.id, product_id):
        raise HTTPException(status_code=404, detail="Wishlist item not found")
    return SuccessResponse(message="Item removed from wishlist")

@wishlist_router.post("/{product_id}/move-to-cart", response_model=CartItemResponse)
async def move_wishlist_item_to_cart(
    product_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """위시리스트 항목을 장바구니로 이동"""
    logger.info("Move wishlist item to cart", user_id=profile.id, product_id=product_id)

    try:
        return WishlistService(db).move_to_cart(profile.id, product_id)

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to move wishlist item", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to move item to cart")
