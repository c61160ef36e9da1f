"""
애플리케이션 설정 관리
"""
from decimal import Decimal
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 애플리케이션 정보
    APP_NAME: str = "Storefront API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 서버 설정
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # 데이터베이스 설정
    DATABASE_URL: str = Field(
        default="sqlite:///./storefront.db",
        description="Database URL (PostgreSQL 권장, 개발용 SQLite 지원)"
    )
    DATABASE_ECHO: bool = False
    SEED_SAMPLE_DATA: bool = Field(default=False, description="빈 카탈로그에 샘플 데이터 입력")

    # 결제/금액 설정
    TAX_RATE: Decimal = Field(default=Decimal("0.08"), description="세율")
    SHIPPING_AMOUNT: Decimal = Field(default=Decimal("0.00"), description="배송비")
    CURRENCY: str = "USD"
    DEFAULT_COUNTRY: str = "United States"

    # 주문 번호 설정
    ORDER_NUMBER_TIMEZONE: str = Field(
        default="UTC",
        description="주문 번호 날짜(YYYYMMDD) 계산에 사용하는 시간대"
    )
    ORDER_NUMBER_MAX_RETRIES: int = Field(default=3, ge=1, description="주문 번호 충돌 시 재시도 횟수")

    # 카탈로그 설정
    FEATURED_PRODUCTS_LIMIT: int = 8
    HOME_CATEGORIES_LIMIT: int = 6

    # CORS 설정
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = True


# 전역 설정 인스턴스
settings = Settings()
