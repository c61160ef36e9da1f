"""
장바구니 / 위시리스트 서비스 로직
"""
from decimal import Decimal
from typing import Dict, List, Optional
from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import NotFoundError, ValidationError
from storefront.models.cart import CartItem, WishlistItem
from storefront.models.product import Product


class CartService:
    def __init__(self, db: Session):
        self.db = db

    def _get_active_product(self, product_id: str) -> Product:
        product = self.db.query(Product).filter(Product.id == product_id, Product.is_active.is_(True)).first()
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def get_cart_items(self, user_id: str) -> List[CartItem]:
        """장바구니 항목 (담은 순서)"""
        return self.db.query(CartItem).options(
            selectinload(CartItem.product).selectinload(Product.images)
        ).filter(CartItem.user_id == user_id).order_by(CartItem.created_at).all()

    def get_cart_item(self, user_id: str, product_id: str) -> Optional[CartItem]:
        return self.db.query(CartItem).filter(
            CartItem.user_id == user_id, CartItem.product_id == product_id
        ).first()

    def get_cart(self, user_id: str) -> Dict:
        """장바구니와 합계"""
        items = self.get_cart_items(user_id)
        return {
            "items": items,
            "item_count": sum(item.quantity for item in items),
            "subtotal": self.get_subtotal(items),
        }

    @staticmethod
    def get_subtotal(items: List[CartItem]) -> Decimal:
        return sum((item.line_total for item in items), Decimal("0.00"))

    def stage_add(self, user_id: str, product_id: str, quantity: int = 1) -> CartItem:
        """커밋 없이 장바구니에 추가 (이미 있으면 수량 증가)"""
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")
        self._get_active_product(product_id)

        item = self.get_cart_item(user_id, product_id)
        if item:
            item.quantity += quantity
        else:
            item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
            self.db.add(item)
        return item

    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> CartItem:
        """장바구니 담기"""
        item = self.stage_add(user_id, product_id, quantity)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_quantity(self, user_id: str, product_id: str, quantity: int) -> Optional[CartItem]:
        """수량 변경. 0 이하이면 항목 삭제 후 None"""
        item = self.get_cart_item(user_id, product_id)
        if item is None:
            raise NotFoundError("Cart item", product_id)

        if quantity <= 0:
            self.db.delete(item)
            self.db.commit()
            return None

        item.quantity = quantity
        self.db.commit()
        self.db.refresh(item)
        return item

    def remove_item(self, user_id: str, product_id: str) -> bool:
        """장바구니 항목 삭제"""
        item = self.get_cart_item(user_id, product_id)
        if item:
            self.db.delete(item)
            self.db.commit()
            return True
        return False

    def stage_clear(self, user_id: str) -> int:
        """커밋 없이 장바구니 비우기"""
        return self.db.query(CartItem).filter(CartItem.user_id == user_id).delete(synchronize_session="fetch")

    def clear_cart(self, user_id: str) -> int:
        """장바구니 비우기"""
        removed = self.stage_clear(user_id)
        self.db.commit()
        return removed


class WishlistService:
    def __init__(self, db: Session):
        self.db = db

    def get_wishlist(self, user_id: str) -> List[WishlistItem]:
        """위시리스트 (최신순)"""
        return self.db.query(WishlistItem).options(
            selectinload(WishlistItem.product).selectinload(Product.images)
        ).filter(WishlistItem.user_id == user_id).order_by(WishlistItem.created_at.desc()).all()

    def get_item(self, user_id: str, product_id: str) -> Optional[WishlistItem]:
        return self.db.query(WishlistItem).filter(
            WishlistItem.user_id == user_id, WishlistItem.product_id == product_id
        ).first()

    def is_in_wishlist(self, user_id: str, product_id: str) -> bool:
        return self.get_item(user_id, product_id) is not None

    def add_item(self, user_id: str, product_id: str) -> WishlistItem:
        """위시리스트 추가 (이미 있으면 기존 항목 반환)"""
        item = self.get_item(user_id, product_id)
        if item:
            return item

        product = self.db.query(Product).filter(Product.id == product_id, Product.is_active.is_(True)).first()
        if product is None:
            raise NotFoundError("Product", product_id)

        item = WishlistItem(user_id=user_id, product_id=product_id)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def remove_item(self, user_id: str, product_id: str) -> bool:
        """위시리스트 삭제"""
        item = self.get_item(user_id, product_id)
        if item:
            self.db.delete(item)
            self.db.commit()
            return True
        return False

    def toggle(self, user_id: str, product_id: str) -> bool:
        """있으면 삭제, 없으면 추가. 변경 후 포함 여부 반환"""
        if self.remove_item(user_id, product_id):
            return False
        self.add_item(user_id, product_id)
        return True

    def move_to_cart(self, user_id: str, product_id: str) -> CartItem:
        """위시리스트 항목을 장바구니로 이동 (한 트랜잭션)"""
        item = self.get_item(user_id, product_id)
        if item is None:
            raise NotFoundError("Wishlist item", product_id)

        cart_item = CartService(self.db).stage_add(user_id, product_id, 1)
        self.db.delete(item)
        self.db.commit()
        self.db.refresh(cart_item)
        return cart_item
