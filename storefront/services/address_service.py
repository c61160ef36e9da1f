"""
배송지 주소 서비스 로직

기본 주소 단일성은 storefront.db.hooks 의 쓰기 훅이 같은 트랜잭션 안에서 보장한다.
"""
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from storefront.core.exceptions import NotFoundError
from storefront.models.address import Address


class AddressService:
    def __init__(self, db: Session):
        self.db = db

    def get_addresses(self, user_id: str) -> List[Address]:
        """사용자 주소 목록 (기본 주소 먼저, 이후 최신순)"""
        return self.db.query(Address).filter(Address.user_id == user_id).order_by(
            Address.is_default.desc(), Address.created_at.desc()
        ).all()

    def get_address(self, user_id: str, address_id: str) -> Address:
        """본인 주소 조회"""
        address = self.db.query(Address).filter(
            Address.id == address_id, Address.user_id == user_id
        ).first()
        if address is None:
            raise NotFoundError("Address", address_id)
        return address

    def get_default_address(self, user_id: str) -> Optional[Address]:
        return self.db.query(Address).filter(
            Address.user_id == user_id, Address.is_default.is_(True)
        ).first()

    def create_address(self, user_id: str, address_data: Dict) -> Address:
        """새 주소 생성"""
        address = Address(user_id=user_id)
        self._apply(address, address_data)
        self.db.add(address)
        self.db.commit()
        self.db.refresh(address)
        return address

    def update_address(self, user_id: str, address_id: str, address_data: Dict) -> Address:
        """주소 부분 업데이트"""
        address = self.get_address(user_id, address_id)
        self._apply(address, address_data)
        self.db.commit()
        self.db.refresh(address)
        return address

    def upsert_address(self, user_id: str, address_data: Dict) -> Address:
        """주소 생성 또는 업데이트 (address_data 에 id 가 있으면 업데이트)"""
        address_id = address_data.get("id")
        if address_id:
            data = {key: value for key, value in address_data.items() if key != "id"}
            return self.update_address(user_id, address_id, data)
        return self.create_address(user_id, address_data)

    def set_default_address(self, user_id: str, address_id: str) -> Address:
        """기본 주소 지정 (다른 주소 해제는 쓰기 훅이 처리)"""
        return self.update_address(user_id, address_id, {"is_default": True})

    def delete_address(self, user_id: str, address_id: str) -> bool:
        """주소 삭제"""
        address = self.get_address(user_id, address_id)
        self.db.delete(address)
        self.db.commit()
        return True

    @staticmethod
    def _apply(address: Address, address_data: Dict):
        for key, value in address_data.items():
            if key in ("id", "user_id", "created_at", "updated_at"):
                continue
            if hasattr(address, key):
                setattr(address, key, value.value if hasattr(value, "value") else value)
