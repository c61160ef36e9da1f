"""
프로필 API 엔드포인트
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import structlog

from storefront.api.deps import get_current_user_id, to_http_exception
from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.services.profile_service import ProfileService
from storefront.schemas.profile import ProfileResponse, ProfileUpdate

logger = structlog.get_logger()

router = APIRouter()

@router.get("/", response_model=ProfileResponse)
async def get_profile(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """내 프로필 조회"""
    profile = ProfileService(db).get_profile(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile

@router.put("/", response_model=ProfileResponse)
async def update_profile(
    profile_update: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """프로필 생성 또는 수정"""
    logger.info("Update profile request", user_id=user_id)

    try:
        profile = ProfileService(db).upsert_profile(user_id, profile_update.model_dump(exclude_unset=True))
        logger.info("Profile updated successfully", user_id=user_id)
        return profile

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to update profile", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Error updating profile. Please try again.")
