"""
프로필 스키마
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    """프로필 생성/수정 스키마 (최초 생성 시 email 필수)"""
    email: Optional[str] = Field(None, min_length=3, description="이메일")
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    class Config:
        str_strip_whitespace = True


class ProfileResponse(BaseModel):
    """프로필 응답 스키마"""
    id: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
