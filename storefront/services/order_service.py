"""
주문 관련 서비스 로직
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from storefront.core.config import settings
from storefront.core.exceptions import InvalidStatusTransitionError, NotFoundError, ValidationError
from storefront.models.order import Order, OrderItem, OrderStatus, PaymentStatus
from storefront.models.product import Product

logger = structlog.get_logger()

CENTS = Decimal("0.01")

# 사용자가 취소할 수 있는 상태
CANCELLABLE_STATUSES = {OrderStatus.PENDING.value, OrderStatus.CONFIRMED.value}


def to_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def is_order_number_collision(error: IntegrityError) -> bool:
    """주문 번호 UNIQUE 제약 / 일자 카운터 생성 충돌 여부"""
    return "order_number" in str(error.orig)


class OrderService:
    def __init__(self, db: Session):
        self.db = db

    def commit_new_order(self, build: Callable[[], Order], retry: bool = True) -> Order:
        """build() 로 주문을 세션에 올리고 커밋.

        자동 발급된 주문 번호가 동시 발급과 충돌하면 롤백 후 build() 부터 다시 실행한다.
        """
        attempts = settings.ORDER_NUMBER_MAX_RETRIES if retry else 1
        for attempt in range(1, attempts + 1):
            order = build()
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                if not retry or not is_order_number_collision(e) or attempt == attempts:
                    raise
                logger.warning("Order number collision, retrying", attempt=attempt, error=str(e.orig))
                continue
            self.db.refresh(order)
            return order

    def build_order_items(self, items: List[Dict]) -> List[OrderItem]:
        """상품 정보(이름/SKU/단가)를 복사한 주문 항목 생성"""
        order_items = []
        for item in items:
            product = self.db.query(Product).filter(
                Product.id == item["product_id"], Product.is_active.is_(True)
            ).first()
            if product is None:
                raise ValidationError(f"Product is not available: {item['product_id']}")

            quantity = item.get("quantity", 1)
            unit_price = to_money(product.price)
            order_items.append(OrderItem(
                product_id=product.id,
                product_name=product.name,
                product_sku=product.sku,
                quantity=quantity,
                unit_price=unit_price,
                total_price=to_money(unit_price * quantity),
            ))
        return order_items

    def create_order(self, user_id: str, order_data: Dict) -> Order:
        """새 주문 생성 (주문 항목 포함, 한 트랜잭션)

        order_number 가 비어 있으면 쓰기 훅이 발급한다. 금액은 항목 합계, 세율,
        배송비/할인 금액으로 계산한다.
        """
        preassigned = order_data.get("order_number") or None

        def build() -> Order:
            items = self.build_order_items(order_data["items"])
            subtotal = sum((item.total_price for item in items), Decimal("0.00"))
            shipping = to_money(order_data.get("shipping_amount") or 0)
            discount = to_money(order_data.get("discount_amount") or 0)
            tax = to_money(subtotal * settings.TAX_RATE)

            order = Order(
                order_number=preassigned,
                user_id=user_id,
                status=_enum_value(order_data.get("status"), OrderStatus, OrderStatus.PENDING.value),
                payment_status=_enum_value(order_data.get("payment_status"), PaymentStatus, PaymentStatus.PENDING.value),
                total_amount=to_money(subtotal + tax + shipping - discount),
                shipping_amount=shipping,
                tax_amount=tax,
                discount_amount=discount,
                currency=order_data.get("currency") or settings.CURRENCY,
                shipping_address=dict(order_data["shipping_address"]),
                billing_address=dict(order_data["billing_address"]) if order_data.get("billing_address") else None,
                payment_method=order_data.get("payment_method"),
                payment_id=order_data.get("payment_id"),
                notes=order_data.get("notes"),
            )
            order.items = items
            self.db.add(order)
            return order

        order = self.commit_new_order(build, retry=preassigned is None)
        logger.info("Order created", order_number=order.order_number, user_id=user_id)
        return order

    def _query_user_orders(self, user_id: str):
        return self.db.query(Order).options(selectinload(Order.items)).filter(Order.user_id == user_id)

    def get_orders_for_user(self, user_id: str, status: Optional[str] = None) -> List[Order]:
        """사용자 주문 내역 (최신순)"""
        query = self._query_user_orders(user_id)
        if status:
            query = query.filter(Order.status == status)
        return query.order_by(Order.created_at.desc()).all()

    def get_order(self, user_id: str, order_id: str) -> Order:
        """주문 ID로 본인 주문 조회"""
        order = self._query_user_orders(user_id).filter(Order.id == order_id).first()
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def get_order_by_number(self, user_id: str, order_number: str) -> Order:
        """주문 번호로 본인 주문 조회"""
        order = self._query_user_orders(user_id).filter(Order.order_number == order_number).first()
        if order is None:
            raise NotFoundError("Order", order_number)
        return order

    def cancel_order(self, user_id: str, order_id: str) -> Order:
        """본인 주문 취소 (pending / confirmed 상태만)"""
        order = self.get_order(user_id, order_id)
        if order.status not in CANCELLABLE_STATUSES:
            raise InvalidStatusTransitionError(order.status, OrderStatus.CANCELLED.value)

        order.status = OrderStatus.CANCELLED.value
        self.db.commit()
        self.db.refresh(order)
        logger.info("Order cancelled", order_number=order.order_number, user_id=user_id)
        return order

    def update_order_status(self, order_id: str, status: Optional[str] = None,
                            payment_status: Optional[str] = None) -> Optional[Order]:
        """주문 상태 / 결제 상태 업데이트 (운영용)"""
        db_order = self.db.query(Order).filter(Order.id == order_id).first()
        if db_order:
            if status:
                db_order.status = _enum_value(status, OrderStatus, db_order.status)
            if payment_status:
                db_order.payment_status = _enum_value(payment_status, PaymentStatus, db_order.payment_status)
            self.db.commit()
            self.db.refresh(db_order)
        return db_order

    def get_order_counts_by_status(self, user_id: str) -> Dict[str, int]:
        """주문 상태별 건수 조회"""
        counts = {}
        for order in self.get_orders_for_user(user_id):
            counts[order.status] = counts.get(order.status, 0) + 1
        return counts


def _enum_value(value, enum_cls, default: str) -> str:
    """enum 값 검증 후 문자열 반환"""
    if value is None:
        return default
    try:
        return enum_cls(value).value
    except ValueError:
        raise ValidationError(f"Invalid {enum_cls.__name__}: {value}")
