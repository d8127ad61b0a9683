# drawwang/core/tasks.py

"""
ARQ 워커가 실행하는 주기 태스크 모듈입니다.

- health_check_database_task: 데이터베이스 연결 상태 확인.
- cleanup_orphan_images_task: 어떤 게시글도 참조하지 않는 이미지 파일 정리.
"""

import logging
import time
from pathlib import Path

from sqlmodel import select

from drawwang.core.config import settings
from drawwang.core.database import get_async_session_context
from drawwang.domains.board import models as board_models

logger = logging.getLogger(__name__)


async def health_check_database_task(ctx):
    """
    데이터베이스에 간단한 쿼리를 실행하여 연결 상태를 확인합니다.
    """
    logger.info("ARQ task: database health check")

    try:
        async with get_async_session_context() as db:
            result = await db.execute(select(1))
            if result.scalar_one_or_none() == 1:
                return {"status": "success", "message": "Database connection successful."}
            error_msg = "Database health check failed: No result from test query."
    except Exception as e:
        logger.exception("Database health check failed")
        error_msg = f"Database connection error: {e}"

    logger.error(error_msg)
    return {"status": "failed", "message": error_msg}


async def cleanup_orphan_images_task(ctx):
    """
    UPLOAD_DIR에 남아 있지만 어떤 게시글(Board.image_id)도 참조하지 않는 이미지를 삭제합니다.

    제출 도중 프로세스가 중단되어 DB 롤백 후에도 파일만 남은 경우를 정리합니다.
    진행 중인 제출과 겹치지 않도록 ORPHAN_IMAGE_GRACE_SECONDS보다 오래된 파일만 대상입니다.
    """
    logger.info("ARQ task: orphan image cleanup started")

    upload_dir = Path(settings.UPLOAD_DIR)
    if not upload_dir.is_dir():
        return {"status": "success", "message": "Upload directory does not exist.", "deleted_count": 0}

    async with get_async_session_context() as session:
        result = await session.execute(
            select(board_models.Board.image_id).where(board_models.Board.image_id.is_not(None))
        )
        in_use_image_ids = set(result.scalars().all())

    cutoff = time.time() - settings.ORPHAN_IMAGE_GRACE_SECONDS
    deleted_count = 0
    for file_path in upload_dir.iterdir():
        if not file_path.is_file() or file_path.name in in_use_image_ids:
            continue
        if file_path.stat().st_mtime > cutoff:
            continue
        try:
            file_path.unlink()
            deleted_count += 1
            logger.info("Deleted orphan image: %s", file_path.name)
        except OSError:
            logger.exception("Failed to delete orphan image: %s", file_path)

    logger.info("ARQ task: orphan image cleanup finished (%d deleted)", deleted_count)
    return {"status": "success", "message": "Orphan image cleanup finished.", "deleted_count": deleted_count}
