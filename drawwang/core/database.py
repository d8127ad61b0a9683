# drawwang/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 서비스 계층에서 사용하는 트랜잭션 단위(UnitOfWork)를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

import logging
from typing import AsyncGenerator, List, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core.config import settings
from drawwang.core.events import DomainEvent, EventPublisher, publisher as default_publisher

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 명시적으로 임포트합니다.
from drawwang.domains import models  # noqa

logger = logging.getLogger(__name__)

_database_url = settings.DATABASE_URL.get_secret_value()
_engine_options = {
    "echo": settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    "future": True,
}
if not _database_url.startswith("sqlite"):
    _engine_options.update(
        pool_recycle=3600,  # 1시간마다 연결 재활용
        pool_size=10,
        max_overflow=20,
    )

engine: AsyncEngine = create_async_engine(_database_url, **_engine_options)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def create_db_and_tables() -> None:
    """
    누락된 테이블을 생성합니다. 기존 테이블을 삭제하지는 않습니다. (개발용)
    """
    logger.info("Creating database tables (if missing)...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables are ready.")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    ARQ Task 등 비동기 컨텍스트에서 사용할 수 있는
    독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# =============================================================================
# 트랜잭션 단위 (UnitOfWork)
# =============================================================================
class UnitOfWork:
    """
    하나의 서비스 호출을 all-or-nothing 트랜잭션으로 묶습니다.

    - 블록이 정상 종료되면 commit 후, 수집된 이벤트를 순서대로 발행합니다.
    - 예외가 발생하면 rollback 하고 이벤트는 폐기한 뒤 예외를 그대로 전파합니다.

        async with UnitOfWork(db, publisher) as uow:
            ...
            uow.collect(SomeEvent(...))
    """

    def __init__(self, db: AsyncSession, publisher: Optional[EventPublisher] = None):
        self.db = db
        self.publisher = publisher or default_publisher
        self._events: List[DomainEvent] = []

    def collect(self, event: DomainEvent) -> None:
        self._events.append(event)

    async def __aenter__(self) -> "UnitOfWork":
        self._events = []
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            await self.db.rollback()
            self._events.clear()
            return False

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            self._events.clear()
            raise

        events, self._events = self._events, []
        for event in events:
            await self.publisher.publish(event)
        return False
