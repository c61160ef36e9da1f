"""
주문 관련 스키마
"""
import enum
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator

from storefront.models.order import OrderStatus, PaymentStatus
from .address import AddressResponse, AddressSnapshot
from .cart import CartItemResponse


class PaymentMethod(str, enum.Enum):
    COD = "cod"
    CARD = "card"


class OrderItemCreate(BaseModel):
    """주문 항목 생성 스키마 (상품 정보는 주문 시점에 복사)"""
    product_id: str = Field(..., description="상품 ID")
    quantity: int = Field(1, ge=1, description="수량")


class OrderCreate(BaseModel):
    """주문 생성 스키마"""
    order_number: Optional[str] = Field(None, description="주문 번호 (비우면 자동 발급)")
    status: OrderStatus = Field(OrderStatus.PENDING, description="주문 상태")
    payment_status: PaymentStatus = Field(PaymentStatus.PENDING, description="결제 상태")
    shipping_address: AddressSnapshot = Field(..., description="배송지 사본")
    billing_address: Optional[AddressSnapshot] = Field(None, description="청구지 사본")
    shipping_amount: Decimal = Field(Decimal("0.00"), ge=0)
    discount_amount: Decimal = Field(Decimal("0.00"), ge=0)
    payment_method: Optional[str] = None
    payment_id: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemCreate] = Field(..., min_length=1, description="주문 항목")


class OrderStatusUpdate(BaseModel):
    """주문 상태 업데이트 스키마"""
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None


class OrderItemResponse(BaseModel):
    """주문 항목 응답 스키마"""
    id: str
    product_id: str
    product_name: str
    product_sku: Optional[str] = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """주문 응답 스키마"""
    id: str = Field(..., description="주문 ID")
    order_number: str = Field(..., description="주문 번호")
    user_id: str
    status: OrderStatus
    payment_status: PaymentStatus
    total_amount: Decimal
    shipping_amount: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    currency: str
    shipping_address: AddressSnapshot
    billing_address: Optional[AddressSnapshot] = None
    payment_method: Optional[str] = None
    payment_id: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemResponse] = []
    created_at: datetime = Field(..., description="생성 일시")
    updated_at: datetime = Field(..., description="수정 일시")

    class Config:
        from_attributes = True


class CheckoutSummary(BaseModel):
    """결제 1단계: 배송지 선택 화면 데이터"""
    items: List[CartItemResponse]
    addresses: List[AddressResponse]
    selected_address_id: Optional[str] = Field(None, description="기본 주소 자동 선택")
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    total_amount: Decimal
    currency: str


class CheckoutRequest(BaseModel):
    """결제 2단계: 주문 생성 요청 (카드 결제는 모의 처리, 카드 정보 미저장)"""
    address_id: str = Field(..., description="배송지 주소 ID")
    billing_address_id: Optional[str] = Field(None, description="청구지 주소 ID")
    payment_method: PaymentMethod = Field(PaymentMethod.COD, description="결제 수단")
    card_number: Optional[str] = None
    expiry_date: Optional[str] = None
    cvv: Optional[str] = None
    card_name: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_card_details(self):
        if self.payment_method == PaymentMethod.CARD:
            fields = (self.card_number, self.expiry_date, self.cvv, self.card_name)
            if any(not (value or "").strip() for value in fields):
                raise ValueError("Please fill in all card details")
        return self
