"""
주문 / 체크아웃 API 엔드포인트
"""
from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import structlog

from storefront.api.deps import get_current_profile, integrity_conflict, to_http_exception
from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.models.order import OrderStatus
from storefront.models.profile import Profile
from storefront.services.checkout_service import CheckoutService
from storefront.services.order_service import OrderService
from storefront.schemas.order import (
    CheckoutRequest, CheckoutSummary, OrderCreate, OrderResponse, OrderStatusUpdate,
)

logger = structlog.get_logger()

router = APIRouter()
checkout_router = APIRouter()

@router.get("/", response_model=List[OrderResponse])
async def get_orders(
    status: Optional[OrderStatus] = Query(None, description="주문 상태 필터"),
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주문 내역 조회 (최신순)"""
    logger.info("Get orders request", user_id=profile.id, status=status)

    order_service = OrderService(db)

    try:
        return order_service.get_orders_for_user(profile.id, status.value if status else None)

    except Exception as e:
        logger.error("Failed to get orders", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load orders")

@router.post("/", response_model=OrderResponse, status_code=201)
async def create_order(
    order: OrderCreate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """새 주문 생성 (order_number 를 비우면 자동 발급)"""
    logger.info("Create order request", user_id=profile.id, order_number=order.order_number)

    order_service = OrderService(db)

    try:
        new_order = order_service.create_order(profile.id, order.model_dump())
        logger.info("Order created successfully", order_number=new_order.order_number)
        return new_order

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        logger.warning("Order write rejected", error=str(e.orig))
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to create order", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create order")

@router.get("/stats/counts")
async def get_order_counts(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)) -> Dict[str, int]:
    """주문 상태별 건수 조회"""
    logger.info("Get order counts request", user_id=profile.id)

    order_service = OrderService(db)

    try:
        return order_service.get_order_counts_by_status(profile.id)

    except Exception as e:
        logger.error("Failed to get order counts", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load order statistics")

@router.get("/number/{order_number}", response_model=OrderResponse)
async def get_order_by_number(
    order_number: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주문 번호로 주문 조회"""
    logger.info("Get order by number", order_number=order_number)

    try:
        return OrderService(db).get_order_by_number(profile.id, order_number)

    except StorefrontError as e:
        raise to_http_exception(e)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """특정 주문 상세 조회"""
    logger.info("Get order detail", order_id=order_id)

    order_service = OrderService(db)

    try:
        return order_service.get_order(profile.id, order_id)

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to get order detail", order_id=order_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load order")

@router.post("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """주문 취소"""
    logger.info("Cancel order request", order_id=order_id, user_id=profile.id)

    try:
        return OrderService(db).cancel_order(profile.id, order_id)

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to cancel order", order_id=order_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to cancel order")

@router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    status_update: OrderStatusUpdate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주문 상태 업데이트 (관리자 전용)"""
    logger.info("Update order status", order_id=order_id, status=status_update.status)

    if not profile.is_admin:
        raise HTTPException(status_code=403, detail="Admin privileges required")

    order_service = OrderService(db)

    try:
        updated_order = order_service.update_order_status(
            order_id, status_update.status, status_update.payment_status
        )
        if not updated_order:
            raise HTTPException(status_code=404, detail="Order not found")

        logger.info("Order status updated successfully", order_id=order_id, status=updated_order.status)
        return updated_order

    except HTTPException:
        raise
    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to update order status", order_id=order_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update order status")

@checkout_router.get("/", response_model=CheckoutSummary)
async def get_checkout_summary(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """결제 1단계: 장바구니 합계와 배송지 목록"""
    logger.info("Get checkout summary", user_id=profile.id)

    try:
        return CheckoutService(db).get_summary(profile.id)

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to load checkout", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load checkout")

@checkout_router.post("/", response_model=OrderResponse, status_code=201)
async def place_order(
    checkout: CheckoutRequest,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """결제 2단계: 주문 생성 (응답의 order_number 가 3단계 확인 화면에 표시됨)"""
    logger.info("Place order request", user_id=profile.id, payment_method=checkout.payment_method.value)

    try:
        return CheckoutService(db).place_order(profile.id, checkout.model_dump())

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        logger.warning("Order write rejected", error=str(e.orig))
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to place order", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Error placing order. Please try again.")
