"""Storefront API - 상품 카탈로그, 장바구니, 결제, 주문 관리"""

__version__ = "1.0.0"
