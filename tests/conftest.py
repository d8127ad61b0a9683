# tests/conftest.py

import sys
import os
import shutil
import tempfile
from typing import AsyncGenerator, List

# --- 테스트 환경 변수 ---
# drawwang 모듈이 임포트되기 전에 설정해야 settings와 엔진에 반영됩니다.
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
# 이미지 제공용 StaticFiles 마운트가 이 디렉토리에 고정되므로 세션 종료 시 삭제합니다.
_CREATED_UPLOAD_DIR = None
if "UPLOAD_DIR" not in os.environ:
    _CREATED_UPLOAD_DIR = tempfile.mkdtemp(prefix="drawwang-uploads-")
    os.environ["UPLOAD_DIR"] = _CREATED_UPLOAD_DIR

# --- 경로 설정 ---
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from drawwang.main import app as main_app  # noqa: E402
from drawwang.core import dependencies as deps  # noqa: E402
from drawwang.core.config import settings  # noqa: E402
from drawwang.core.database import get_session  # noqa: E402
from drawwang.core.events import DomainEvent, publisher  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 합니다.
from drawwang.domains.models import *  # noqa: F401, F403, E402
from drawwang.domains.thread import models as thread_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 독립된 인메모리 SQLite 데이터베이스를 사용합니다.
# StaticPool로 하나의 연결을 공유해야 같은 인메모리 DB를 바라봅니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="session", autouse=True)
def cleanup_default_upload_dir():
    """테스트 세션이 끝나면 conftest가 만든 기본 업로드 디렉토리를 삭제합니다."""
    yield
    if _CREATED_UPLOAD_DIR is not None:
        shutil.rmtree(_CREATED_UPLOAD_DIR, ignore_errors=True)


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트 함수마다 테이블이 생성된 새 엔진을 제공합니다."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine: AsyncEngine) -> sessionmaker:
    """테스트 엔진에 바인딩된 세션 팩토리 (애플리케이션과 동일한 옵션)"""
    return sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트 함수에서 사용할 비동기 데이터베이스 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def upload_dir(tmp_path, monkeypatch):
    """
    UPLOAD_DIR을 테스트 전용 임시 디렉토리로 바꿉니다.
    FileStore와 정리 태스크는 호출 시점에 settings를 읽으므로 바로 반영됩니다.
    """
    directory = tmp_path / "uploads"
    directory.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture(scope="function")
def recorded_events() -> List[DomainEvent]:
    """전역 publisher로 발행되는 모든 도메인 이벤트를 기록합니다."""
    events: List[DomainEvent] = []

    def _record(event: DomainEvent) -> None:
        events.append(event)

    publisher.subscribe(DomainEvent, _record)
    yield events
    publisher.unsubscribe(DomainEvent, _record)


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """

    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인별 공통 픽스처 ---
@pytest_asyncio.fixture(name="test_thread")
async def test_thread_fixture(db_session: AsyncSession) -> thread_models.Thread:
    """테스트용 스레드를 데이터베이스에 생성하고 반환합니다."""
    thread = thread_models.Thread(title="테스트 스레드")
    db_session.add(thread)
    await db_session.commit()
    await db_session.refresh(thread)
    return thread
