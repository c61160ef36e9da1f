"""
주문 모델
"""
import enum
from sqlalchemy import JSON, CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, generate_uuid, utcnow


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


def _in_check(column: str, values) -> str:
    return f"{column} IN ({', '.join(repr(v.value) for v in values)})"


class Order(TimestampMixin, Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(_in_check("status", OrderStatus), name="ck_orders_status"),
        CheckConstraint(_in_check("payment_status", PaymentStatus), name="ck_orders_payment_status"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    # 비어 있으면 before_insert 훅에서 ORD-YYYYMMDD-NNNN 형식으로 채움
    order_number = Column(String, unique=True, nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String, default=OrderStatus.PENDING.value, nullable=False, index=True)
    payment_status = Column(String, default=PaymentStatus.PENDING.value, nullable=False)
    total_amount = Column(Numeric(10, 2), default=0, nullable=False)
    shipping_amount = Column(Numeric(10, 2), default=0, nullable=False)
    tax_amount = Column(Numeric(10, 2), default=0, nullable=False)
    discount_amount = Column(Numeric(10, 2), default=0, nullable=False)
    currency = Column(String(3), default="USD", nullable=False)
    shipping_address = Column(JSON, nullable=False)
    billing_address = Column(JSON)
    payment_method = Column(String)
    payment_id = Column(String)
    notes = Column(Text)

    owner = relationship("Profile", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.created_at",
    )

    def __repr__(self):
        return f"<Order(id='{self.id}', order_number='{self.order_number}', status='{self.status}')>"


class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    product_name = Column(String, nullable=False)
    product_sku = Column(String)
    quantity = Column(Integer, default=1, nullable=False)
    unit_price = Column(Numeric(10, 2), default=0, nullable=False)
    total_price = Column(Numeric(10, 2), default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    order = relationship("Order", back_populates="items")

    def __repr__(self):
        return f"<OrderItem(order_id='{self.order_id}', product_sku='{self.product_sku}', quantity={self.quantity})>"


class OrderNumberCounter(Base):
    """일자별 주문 번호 발급 잠금 행"""

    __tablename__ = "order_number_counters"

    day = Column(String(8), primary_key=True)
    last_value = Column(Integer, default=0, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
