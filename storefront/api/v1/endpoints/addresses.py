"""
배송지 주소 API 엔드포인트
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import structlog

from storefront.api.deps import get_current_profile, integrity_conflict, to_http_exception
from storefront.core.exceptions import StorefrontError
from storefront.db.database import get_db
from storefront.models.profile import Profile
from storefront.services.address_service import AddressService
from storefront.schemas.address import AddressCreate, AddressResponse, AddressUpdate
from storefront.schemas.common import SuccessResponse

logger = structlog.get_logger()

router = APIRouter()

@router.get("/", response_model=List[AddressResponse])
async def get_addresses(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    """주소 목록 (기본 주소 먼저)"""
    logger.info("Get addresses request", user_id=profile.id)

    try:
        return AddressService(db).get_addresses(profile.id)

    except Exception as e:
        logger.error("Failed to get addresses", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load addresses")

@router.post("/", response_model=AddressResponse, status_code=201)
async def create_address(
    address: AddressCreate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """새 주소 생성"""
    logger.info("Create address request", user_id=profile.id, is_default=address.is_default)

    try:
        created = AddressService(db).create_address(profile.id, address.model_dump())
        logger.info("Address created successfully", address_id=created.id)
        return created

    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to create address", user_id=profile.id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to save address")

@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(
    address_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주소 상세 조회"""
    try:
        return AddressService(db).get_address(profile.id, address_id)

    except StorefrontError as e:
        raise to_http_exception(e)

@router.put("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: str,
    address_update: AddressUpdate,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주소 업데이트"""
    logger.info("Update address request", user_id=profile.id, address_id=address_id)

    try:
        return AddressService(db).update_address(
            profile.id, address_id, address_update.model_dump(exclude_unset=True)
        )

    except StorefrontError as e:
        raise to_http_exception(e)
    except IntegrityError as e:
        raise integrity_conflict(e)
    except Exception as e:
        logger.error("Failed to update address", address_id=address_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update address")

@router.put("/{address_id}/default", response_model=AddressResponse)
async def set_default_address(
    address_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """기본 주소 지정"""
    logger.info("Set default address request", user_id=profile.id, address_id=address_id)

    try:
        address = AddressService(db).set_default_address(profile.id, address_id)
        logger.info("Default address updated successfully", address_id=address_id)
        return address

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to set default address", address_id=address_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to set default address")

@router.delete("/{address_id}", response_model=SuccessResponse)
async def delete_address(
    address_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    """주소 삭제"""
    logger.info("Delete address request", user_id=profile.id, address_id=address_id)

    try:
        AddressService(db).delete_address(profile.id, address_id)
        return SuccessResponse(message="Address deleted successfully")

    except StorefrontError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error("Failed to delete address", address_id=address_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete address")
