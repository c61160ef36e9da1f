"""
데이터베이스 엔진 / 세션 관리
"""
import sqlite3
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from storefront.core.config import settings
from storefront.models import Base
from storefront.db import hooks  # noqa: F401  주소/주문 쓰기 훅 등록


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 연결마다 외래키 제약(ON DELETE CASCADE)을 켜야 함
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """DATABASE_URL로 엔진 생성"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 30}
    return create_engine(database_url, echo=echo, connect_args=connect_args, future=True)


engine = make_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """요청 단위 DB 세션 (FastAPI 의존성)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine = None):
    """모든 테이블 생성"""
    Base.metadata.create_all(bind=bind or engine)
