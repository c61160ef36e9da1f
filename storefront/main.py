"""
Storefront API - 메인 애플리케이션
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
import structlog

from storefront.core.config import settings
from storefront.core.exceptions import StorefrontError
from storefront.api.v1.api import api_router
from storefront.db.database import SessionLocal, create_tables
from storefront.db.seed import seed_catalog

# 로거 설정
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

def create_application() -> FastAPI:
    """FastAPI 애플리케이션 생성"""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="온라인 쇼핑몰 (카탈로그, 장바구니, 주소록, 주문) API",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API 라우터 등록
    app.include_router(api_router, prefix="/api/v1")

    # 엔드포인트에서 처리하지 못한 도메인 예외 / 제약 위반
    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        logger.warning("Request failed", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("Write rejected by database", path=request.url.path, error=str(exc.orig))
        return JSONResponse(status_code=409, content={"detail": f"Write rejected: {exc.orig}"})

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting Storefront API", version=settings.APP_VERSION)
        logger.info("Initializing database", database_url=settings.DATABASE_URL)

        try:
            create_tables()
            logger.info("Database tables initialized successfully")
        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise

        if settings.SEED_SAMPLE_DATA:
            db = SessionLocal()
            try:
                if seed_catalog(db):
                    logger.info("Sample catalog seeded")
            finally:
                db.close()

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Storefront API")

    return app

# 애플리케이션 인스턴스 생성
app = create_application()

@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production"
    }

@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {"status": "healthy", "version": settings.APP_VERSION}
