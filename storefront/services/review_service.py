"""
상품 리뷰 서비스 로직
"""
from typing import Dict, List
from sqlalchemy.orm import Session

from storefront.core.exceptions import ConflictError, NotFoundError
from storefront.models.order import Order, OrderItem
from storefront.models.product import Product
from storefront.models.review import Review


class ReviewService:
    def __init__(self, db: Session):
        self.db = db

    def get_approved_reviews(self, product_id: str) -> List[Review]:
        """승인된 리뷰 (최신순)"""
        return self.db.query(Review).filter(
            Review.product_id == product_id,
            Review.is_approved.is_(True),
        ).order_by(Review.created_at.desc()).all()

    def has_purchased(self, user_id: str, product_id: str) -> bool:
        """사용자가 해당 상품을 주문한 적이 있는지"""
        return self.db.query(OrderItem.id).join(Order).filter(
            Order.user_id == user_id,
            OrderItem.product_id == product_id,
        ).first() is not None

    def create_review(self, user_id: str, product_id: str, review_data: Dict) -> Review:
        """리뷰 작성 (상품당 1개)"""
        product = self.db.query(Product).filter(Product.id == product_id, Product.is_active.is_(True)).first()
        if product is None:
            raise NotFoundError("Product", product_id)

        existing = self.db.query(Review).filter(
            Review.product_id == product_id, Review.user_id == user_id
        ).first()
        if existing:
            raise ConflictError("You have already reviewed this product")

        review = Review(
            product_id=product_id,
            user_id=user_id,
            rating=review_data["rating"],
            title=review_data.get("title"),
            comment=review_data.get("comment"),
            is_verified=self.has_purchased(user_id, product_id),
        )
        self.db.add(review)
        self.db.commit()
        self.db.refresh(review)
        return review

    def update_review(self, user_id: str, review_id: str, review_data: Dict) -> Review:
        """본인 리뷰 수정"""
        review = self.db.query(Review).filter(Review.id == review_id, Review.user_id == user_id).first()
        if review is None:
            raise NotFoundError("Review", review_id)

        for key, value in review_data.items():
            if hasattr(review, key):
                setattr(review, key, value)
        self.db.commit()
        self.db.refresh(review)
        return review
