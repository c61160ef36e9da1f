"""
API 공통 의존성

인증은 외부 게이트웨이가 처리하고, 인증된 사용자 ID를 X-User-Id 헤더로 전달한다.
"""
from typing import Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.models.profile import Profile


def get_current_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> str:
    """요청 사용자 ID"""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return x_user_id.strip()


def get_current_profile(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Profile:
    """프로필이 있는 사용자만 허용"""
    profile = db.query(Profile).filter(Profile.id == user_id).first()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found. Create it with PUT /api/v1/profile first",
        )
    return profile


def to_http_exception(error: StorefrontError) -> HTTPException:
    """도메인 예외 -> HTTPException"""
    return HTTPException(status_code=error.status_code, detail=error.message)


def integrity_conflict(error: IntegrityError) -> HTTPException:
    """제약 조건 위반 -> 409 (DB 드라이버 메시지 그대로 전달)"""
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Write rejected: {error.orig}")
