# drawwang/domains/thread/routers.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core import dependencies as deps
from drawwang.core.exceptions import ThreadNotFound
from drawwang.domains.board.services import BoardService
from . import crud, schemas


router = APIRouter(
    tags=["Thread (스레드)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.ThreadRead, status_code=status.HTTP_201_CREATED, summary="스레드 생성")
async def create_thread(
    *,
    session: AsyncSession = Depends(deps.get_db_session),
    thread_in: schemas.ThreadCreate,
):
    return await crud.thread.create(session, obj_in=thread_in)


@router.get("/", response_model=List[schemas.ThreadRead], summary="스레드 목록 조회")
async def read_threads(
    skip: int = 0,
    limit: int = 100,
    session: AsyncSession = Depends(deps.get_db_session),
):
    return await crud.thread.get_multi(session, skip=skip, limit=limit)


@router.get("/{thread_id}", response_model=schemas.ThreadReadWithBoards, summary="스레드 상세 조회")
async def read_thread(
    thread_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    service: BoardService = Depends(deps.get_board_service),
):
    """
    스레드 정보와 해당 스레드의 게시글 목록을 함께 반환합니다.
    """
    db_thread = await crud.thread.get(session, id=thread_id)
    if not db_thread:
        raise ThreadNotFound(thread_id)

    boards = await service.list_board(session, thread_id=thread_id)
    return schemas.ThreadReadWithBoards(
        id=db_thread.id,
        title=db_thread.title,
        created_at=db_thread.created_at,
        boards=boards,
    )
