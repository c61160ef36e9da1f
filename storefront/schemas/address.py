"""
배송지 주소 스키마
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from storefront.core.config import settings
from storefront.models.address import AddressType


class AddressBase(BaseModel):
    """주소 기본 스키마"""
    type: AddressType = Field(AddressType.HOME, description="주소 유형")
    name: str = Field(..., min_length=1, description="수령인 / 주소 이름")
    address_line_1: str = Field(..., min_length=1, description="주소 1")
    address_line_2: Optional[str] = Field(None, description="주소 2")
    city: str = Field(..., min_length=1, description="도시")
    state: Optional[str] = Field(None, description="주/도")
    postal_code: str = Field(..., min_length=1, description="우편번호")
    country: str = Field(settings.DEFAULT_COUNTRY, min_length=1, description="국가")
    phone: Optional[str] = Field(None, description="전화번호")
    is_default: bool = Field(False, description="기본 주소 여부")

    class Config:
        str_strip_whitespace = True


class AddressCreate(AddressBase):
    """주소 생성 스키마"""
    pass


class AddressUpdate(BaseModel):
    """주소 업데이트 스키마"""
    type: Optional[AddressType] = None
    name: Optional[str] = Field(None, min_length=1)
    address_line_1: Optional[str] = Field(None, min_length=1)
    address_line_2: Optional[str] = None
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = None
    postal_code: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    is_default: Optional[bool] = None

    class Config:
        str_strip_whitespace = True


class AddressResponse(AddressBase):
    """주소 응답 스키마"""
    id: str = Field(..., description="주소 ID")
    user_id: str = Field(..., description="소유자 ID")
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AddressSnapshot(BaseModel):
    """주문에 복사된 주소"""
    name: str
    address_line_1: str
    address_line_2: Optional[str] = None
    city: str
    state: Optional[str] = None
    postal_code: str
    country: str
    phone: Optional[str] = None
