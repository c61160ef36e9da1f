"""
프로필 서비스 로직
"""
from typing import Dict, Optional
from sqlalchemy.orm import Session

from storefront.core.config import settings
from storefront.core.exceptions import ValidationError
from storefront.models.profile import Profile


class ProfileService:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: str) -> Optional[Profile]:
        """사용자 ID로 프로필 조회"""
        return self.db.query(Profile).filter(Profile.id == user_id).first()

    def upsert_profile(self, user_id: str, profile_data: Dict) -> Profile:
        """프로필 생성 또는 업데이트"""
        profile = self.get_profile(user_id)

        if profile is None:
            if not profile_data.get("email"):
                raise ValidationError("Email is required to create a profile")
            profile = Profile(id=user_id, country=settings.DEFAULT_COUNTRY)
            self.db.add(profile)

        for key, value in profile_data.items():
            if key in ("id", "is_admin") or (key == "email" and not value):
                continue
            if hasattr(profile, key):
                setattr(profile, key, value)

        self.db.commit()
        self.db.refresh(profile)
        return profile
