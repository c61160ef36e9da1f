"""
결제(체크아웃) 서비스 로직

1단계: 장바구니 합계와 배송지 목록(기본 주소 자동 선택)
2단계: 배송지/결제 수단 검증 후 주문 + 주문 항목 생성, 장바구니 비우기 (한 트랜잭션)
3단계: 생성된 주문(주문 번호 포함) 반환
"""
from decimal import Decimal
from typing import Dict

import structlog
from sqlalchemy.orm import Session

from storefront.core.config import settings
from storefront.core.exceptions import EmptyCartError, ValidationError
from storefront.models.order import Order, OrderItem, OrderStatus, PaymentStatus
from storefront.schemas.order import PaymentMethod
from storefront.services.address_service import AddressService
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService, to_money

logger = structlog.get_logger()


def calculate_totals(subtotal: Decimal) -> Dict[str, Decimal]:
    """세금/배송비 포함 결제 금액"""
    subtotal = to_money(subtotal)
    tax = to_money(subtotal * settings.TAX_RATE)
    shipping = to_money(settings.SHIPPING_AMOUNT)
    return {
        "subtotal": subtotal,
        "tax_amount": tax,
        "shipping_amount": shipping,
        "total_amount": to_money(subtotal + tax + shipping),
    }


class CheckoutService:
    def __init__(self, db: Session):
        self.db = db
        self.cart_service = CartService(db)
        self.address_service = AddressService(db)
        self.order_service = OrderService(db)

    def get_summary(self, user_id: str) -> Dict:
        """결제 1단계 화면 데이터"""
        items = self.cart_service.get_cart_items(user_id)
        if not items:
            raise EmptyCartError()

        addresses = self.address_service.get_addresses(user_id)
        default = next((address for address in addresses if address.is_default), None)
        summary = {
            "items": items,
            "addresses": addresses,
            "selected_address_id": default.id if default else None,
            "currency": settings.CURRENCY,
        }
        summary.update(calculate_totals(self.cart_service.get_subtotal(items)))
        return summary

    def place_order(self, user_id: str, checkout_data: Dict) -> Order:
        """주문 생성. 주소는 주문 시점 사본으로 저장"""
        payment_method = PaymentMethod(checkout_data.get("payment_method") or PaymentMethod.COD)
        shipping_address = self.address_service.get_address(user_id, checkout_data["address_id"])
        billing_address = None
        if checkout_data.get("billing_address_id"):
            billing_address = self.address_service.get_address(user_id, checkout_data["billing_address_id"])

        def build() -> Order:
            cart_items = self.cart_service.get_cart_items(user_id)
            if not cart_items:
                raise EmptyCartError()

            order_items = []
            for cart_item in cart_items:
                product = cart_item.product
                if not product.is_active:
                    raise ValidationError(f"Product is no longer available: {product.name}")
                unit_price = to_money(product.price)
                order_items.append(OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    product_sku=product.sku,
                    quantity=cart_item.quantity,
                    unit_price=unit_price,
                    total_price=to_money(unit_price * cart_item.quantity),
                ))

            totals = calculate_totals(sum((item.total_price for item in order_items), Decimal("0.00")))
            order = Order(
                user_id=user_id,
                status=OrderStatus.CONFIRMED.value,
                payment_status=(
                    PaymentStatus.PENDING.value if payment_method == PaymentMethod.COD else PaymentStatus.PAID.value
                ),
                total_amount=totals["total_amount"],
                shipping_amount=totals["shipping_amount"],
                tax_amount=totals["tax_amount"],
                discount_amount=Decimal("0.00"),
                currency=settings.CURRENCY,
                shipping_address=shipping_address.snapshot(),
                billing_address=billing_address.snapshot() if billing_address else None,
                payment_method=payment_method.value,
                notes=checkout_data.get("notes"),
            )
            order.items = order_items
            self.db.add(order)
            self.cart_service.stage_clear(user_id)
            return order

        order = self.order_service.commit_new_order(build)
        logger.info(
            "Checkout completed",
            order_number=order.order_number,
            user_id=user_id,
            total_amount=str(order.total_amount),
            payment_method=payment_method.value,
        )
        return order
