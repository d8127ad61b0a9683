# drawwang/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 게시글 서비스(BoardService) 제공.
"""

from typing import AsyncGenerator
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core.database import get_session as get_main_app_session
from drawwang.domains.board.services import BoardService, board_service


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    drawwang.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_board_service() -> BoardService:
    return board_service
