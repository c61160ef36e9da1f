"""
카탈로그(카테고리/상품) 서비스 로직
"""
from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from storefront.core.config import settings
from storefront.models.category import Category
from storefront.models.product import Product
from storefront.schemas.product import ProductSort

_SORT_ORDER = {
    ProductSort.NAME: (Product.name.asc(),),
    ProductSort.PRICE_LOW: (Product.price.asc(), Product.name.asc()),
    ProductSort.PRICE_HIGH: (Product.price.desc(), Product.name.asc()),
    ProductSort.NEWEST: (Product.created_at.desc(), Product.name.asc()),
}


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def get_active_categories(self) -> List[Category]:
        """활성 카테고리 (이름순)"""
        return self.db.query(Category).filter(Category.is_active.is_(True)).order_by(Category.name).all()

    def get_home_categories(self, limit: Optional[int] = None) -> List[Category]:
        """홈 화면 카테고리 (sort_order 순, 개수 제한)"""
        return self.db.query(Category).filter(
            Category.is_active.is_(True)
        ).order_by(Category.sort_order, Category.name).limit(limit or settings.HOME_CATEGORIES_LIMIT).all()

    def search_products(
        self,
        search: Optional[str] = None,
        category_id: Optional[str] = None,
        sort: ProductSort = ProductSort.NAME,
        page: int = 1,
        size: int = 20,
    ) -> Tuple[List[Product], int]:
        """활성 상품 검색 (이름/설명 부분 일치), 결과와 전체 건수 반환"""
        query = self.db.query(Product).filter(Product.is_active.is_(True))

        if search and search.strip():
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
        if category_id:
            query = query.filter(Product.category_id == category_id)

        total = query.count()
        products = query.options(selectinload(Product.images)).order_by(
            *_SORT_ORDER[sort]
        ).offset((page - 1) * size).limit(size).all()
        return products, total

    def get_featured_products(self, limit: Optional[int] = None) -> List[Product]:
        """추천 상품"""
        return self.db.query(Product).options(selectinload(Product.images)).filter(
            Product.is_active.is_(True),
            Product.is_featured.is_(True),
        ).order_by(Product.created_at.desc()).limit(limit or settings.FEATURED_PRODUCTS_LIMIT).all()

    def get_product(self, product_id: str) -> Optional[Product]:
        """활성 상품 상세 조회"""
        return self.db.query(Product).options(
            selectinload(Product.images),
            selectinload(Product.category),
        ).filter(Product.id == product_id, Product.is_active.is_(True)).first()
