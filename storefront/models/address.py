"""
배송지 주소 모델
"""
import enum
from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Index, String, text
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, generate_uuid


class AddressType(str, enum.Enum):
    HOME = "home"
    WORK = "work"
    OTHER = "other"


class Address(TimestampMixin, Base):
    __tablename__ = "addresses"
    __table_args__ = (
        CheckConstraint("type IN ('home', 'work', 'other')", name="ck_addresses_type"),
        Index("idx_addresses_default", "user_id", "is_default"),
        # 사용자당 기본 주소 1개 (쓰기 훅 뒤의 최종 방어선)
        Index(
            "uq_addresses_single_default",
            "user_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default = 1"),
        ).ddl_if(dialect=("postgresql", "sqlite")),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String, default=AddressType.HOME.value, nullable=False)
    name = Column(String, nullable=False)
    address_line_1 = Column(String, nullable=False)
    address_line_2 = Column(String)
    city = Column(String, nullable=False)
    state = Column(String)
    postal_code = Column(String, nullable=False)
    country = Column(String, default="United States", nullable=False)
    phone = Column(String)
    is_default = Column(Boolean, default=False, nullable=False)

    owner = relationship("Profile", back_populates="addresses")

    def snapshot(self) -> dict:
        """주문에 저장할 주소 사본 (이후 주소 수정과 무관)"""
        return {
            "name": self.name,
            "address_line_1": self.address_line_1,
            "address_line_2": self.address_line_2,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
            "phone": self.phone,
        }

    def __repr__(self):
        return f"<Address(id='{self.id}', user_id='{self.user_id}', is_default={self.is_default})>"
