# drawwang/domains/board/services.py

"""
게시글(Board) 비즈니스 로직을 담당하는 서비스 모듈입니다.

스레드/게시글 CRUD, 파일 저장소(FileStore), 이벤트 발행기(EventPublisher)를 조합하여
게시글 작성, 목록 조회, 좋아요, 신고 기능을 제공합니다.
쓰기 작업은 모두 하나의 UnitOfWork 안에서 수행되며, 이벤트는 commit 이후에 발행됩니다.
"""

import logging
from typing import List, Optional

from fastapi import UploadFile
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core.database import UnitOfWork
from drawwang.core.events import EventPublisher, publisher as default_publisher
from drawwang.core.exceptions import BoardNotFound, ThreadNotFound
from drawwang.domains.thread import crud as thread_crud
from drawwang.domains.thread import models as thread_models
from drawwang.utils.files import FileStore, file_store as default_file_store
from . import crud, models, schemas
from .events import BoardLikedEvent, SubmittedBoardEvent

logger = logging.getLogger(__name__)


def create_board_entity(
    board_in: schemas.BoardSubmitRequest, thread: thread_models.Thread, image_id: Optional[str]
) -> models.Board:
    """새 게시글 엔티티를 만듭니다. 카운터는 항상 0에서 시작합니다."""
    return models.Board(
        user_name=board_in.user_name,
        thread_id=thread.id,
        image_id=image_id,
        likes=0,
        reports=0,
    )


class BoardService:
    def __init__(
        self,
        file_store: Optional[FileStore] = None,
        publisher: Optional[EventPublisher] = None,
    ):
        self.file_store = file_store or default_file_store
        self.publisher = publisher or default_publisher

    async def submit_board(
        self,
        db: AsyncSession,
        *,
        board_in: schemas.BoardSubmitRequest,
        upload_file: Optional[UploadFile] = None,
    ) -> None:
        """
        스레드에 새 게시글을 작성합니다.

        - 스레드가 없으면 ThreadNotFound를 발생시키고 아무것도 생성하지 않습니다.
        - 트랜잭션이 롤백되면 이미 저장한 이미지 파일도 삭제합니다.
        - commit이 성공한 뒤에만 SubmittedBoardEvent가 발행됩니다.
        """
        image_id: Optional[str] = None
        try:
            async with UnitOfWork(db, self.publisher) as uow:
                thread = await self._get_thread(db, board_in.thread_id)
                image_id = await self.file_store.store_file(upload_file)

                db_board = create_board_entity(board_in, thread, image_id)
                db_board = await crud.board.save(db, db_obj=db_board)
                uow.collect(SubmittedBoardEvent(thread=thread, board=db_board))
        except Exception:
            if image_id is not None:
                await self.file_store.delete_file(image_id)
            raise

        logger.info(
            "Board %s submitted to thread %s by '%s' (image: %s)",
            db_board.id, thread.id, db_board.user_name, image_id,
        )

    async def list_board(
        self, db: AsyncSession, *, thread_id: Optional[int] = None
    ) -> List[schemas.BoardResponse]:
        """
        게시글 요약 목록을 생성 순서대로 반환합니다.
        thread_id가 주어지면 해당 스레드의 게시글만 반환합니다.
        """
        db_boards = await crud.board.get_all(db, thread_id=thread_id)
        return [
            schemas.BoardResponse(
                id=db_board.id,
                user_name=db_board.user_name,
                thread_id=db_board.thread_id,
                image_path=self.file_store.get_partial_images_path(db_board.image_id),
                likes=db_board.likes,
                reports=db_board.reports,
            )
            for db_board in db_boards
        ]

    async def board_like(self, db: AsyncSession, *, board_id: int) -> None:
        """게시글의 좋아요 수를 1 증가시키고 BoardLikedEvent를 발행합니다."""
        async with UnitOfWork(db, self.publisher) as uow:
            db_board = await self._increment(db, board_id=board_id, field="likes")
            uow.collect(BoardLikedEvent(board=db_board))

        logger.info("Board %s liked (likes=%s)", board_id, db_board.likes)

    async def board_report(self, db: AsyncSession, *, board_id: int) -> None:
        """게시글의 신고 수를 1 증가시킵니다. 이벤트는 발행하지 않습니다."""
        async with UnitOfWork(db, self.publisher):
            db_board = await self._increment(db, board_id=board_id, field="reports")

        logger.info("Board %s reported (reports=%s)", board_id, db_board.reports)

    async def _increment(self, db: AsyncSession, *, board_id: int, field: str) -> models.Board:
        db_board = await self._get_board(db, board_id)
        if not await crud.board.increment(db, id=board_id, field=field):
            raise BoardNotFound(board_id)
        await db.refresh(db_board)
        return db_board

    async def _get_thread(self, db: AsyncSession, thread_id: int) -> thread_models.Thread:
        db_thread = await thread_crud.thread.get(db, id=thread_id)
        if not db_thread:
            raise ThreadNotFound(thread_id)
        return db_thread

    async def _get_board(self, db: AsyncSession, board_id: int) -> models.Board:
        db_board = await crud.board.get(db, id=board_id)
        if not db_board:
            raise BoardNotFound(board_id)
        return db_board


board_service = BoardService()
