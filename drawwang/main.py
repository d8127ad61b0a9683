# drawwang/main.py

import logging
from pathlib import Path
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from arq import cron
from arq.connections import RedisSettings
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from drawwang import API_PREFIX
from drawwang.core.config import settings
from drawwang.core.database import engine, create_db_and_tables
from drawwang.core import dependencies as deps
from drawwang.core.exceptions import install_error_handlers

from drawwang.core import tasks as core_tasks

# 리스너 모듈은 임포트 시점에 전역 publisher에 등록됩니다.
from drawwang.domains.board import listeners  # noqa: F401

from drawwang.domains.thread.routers import router as thread_router
from drawwang.domains.board.routers import router as board_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# ARQ 워커 설정 클래스 (실행: `arq drawwang.main.ArqWorkerSettings`)
class ArqWorkerSettings:
    redis_settings = RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)
    functions = [
        core_tasks.health_check_database_task,
        core_tasks.cleanup_orphan_images_task,
    ]
    cron_jobs = [
        cron(core_tasks.health_check_database_task, hour=0, minute=0, timeout=300, keep_result=600),
        cron(core_tasks.cleanup_orphan_images_task, hour=1, minute=0, timeout=1800, keep_result=3600),
    ]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(데이터베이스 초기화/종료)를 처리합니다.
    """
    logger.info("%s starting (env=%s)", settings.APP_NAME, settings.APP_ENV)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()

    yield

    logger.info("%s shutting down", settings.APP_NAME)
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

install_error_handlers(app)

# 업로드된 이미지를 IMAGES_URL_PREFIX 경로로 제공합니다.
# 마운트 디렉토리는 앱 생성 시점의 UPLOAD_DIR로 고정됩니다. FileStore는 호출마다 settings를 읽으므로,
# 실행 중에 UPLOAD_DIR을 바꾸면 저장 위치와 제공 위치가 달라집니다.
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount(settings.IMAGES_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="images")

# 개발용: 모든 출처 허용. 프로덕션에서는 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(thread_router, prefix=f"{API_PREFIX}/threads", tags=["Thread (스레드)"])
app.include_router(board_router, prefix=f"{API_PREFIX}/boards", tags=["Board (게시글)"])


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": "Welcome to drawwang API. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(deps.get_db_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용: `python -m drawwang.main`) --
# Docker나 `arq`/`uvicorn` 명령으로 실행하는 경우에는 사용되지 않습니다.
if __name__ == "__main__":
    import uvicorn
    # reload=True는 코드 변경 시 서버를 자동으로 재시작합니다. 프로덕션에서는 사용하지 마세요.
    uvicorn.run("drawwang.main:app", host="0.0.0.0", port=8000, reload=True, log_level=settings.LOG_LEVEL.lower())
