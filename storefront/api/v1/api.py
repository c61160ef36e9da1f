"""
API v1 라우터 메인
"""
from fastapi import APIRouter

from storefront.api.v1.endpoints import addresses, cart, orders, products, profile

api_router = APIRouter()

# 각 엔드포인트 라우터 등록
api_router.include_router(products.router, tags=["catalog"])
api_router.include_router(cart.router, prefix="/cart", tags=["cart"])
api_router.include_router(cart.wishlist_router, prefix="/wishlist", tags=["wishlist"])
api_router.include_router(addresses.router, prefix="/addresses", tags=["addresses"])
api_router.include_router(orders.checkout_router, prefix="/checkout", tags=["checkout"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
