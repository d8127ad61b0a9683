# drawwang/domains/board/routers.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core import dependencies as deps
from . import schemas
from .services import BoardService


router = APIRouter(
    tags=["Board (게시글)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", status_code=status.HTTP_201_CREATED, summary="게시글 작성")
async def submit_board(
    *,
    session: AsyncSession = Depends(deps.get_db_session),
    service: BoardService = Depends(deps.get_board_service),
    user_name: str = Form(..., min_length=1, max_length=50),
    thread_id: int = Form(...),
    file: Optional[UploadFile] = File(None),
):
    """
    스레드에 게시글을 작성합니다. 이미지 파일 첨부는 선택 사항입니다.
    """
    board_in = schemas.BoardSubmitRequest(user_name=user_name, thread_id=thread_id)
    await service.submit_board(session, board_in=board_in, upload_file=file)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/", response_model=List[schemas.BoardResponse], summary="게시글 목록 조회")
async def list_board(
    thread_id: Optional[int] = None,
    session: AsyncSession = Depends(deps.get_db_session),
    service: BoardService = Depends(deps.get_board_service),
):
    """
    모든 게시글을 작성 순서대로 조회합니다. thread_id로 필터링할 수 있습니다.
    """
    return await service.list_board(session, thread_id=thread_id)


@router.post("/{board_id}/like", status_code=status.HTTP_204_NO_CONTENT, summary="게시글 좋아요")
async def board_like(
    board_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    service: BoardService = Depends(deps.get_board_service),
):
    await service.board_like(session, board_id=board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{board_id}/report", status_code=status.HTTP_204_NO_CONTENT, summary="게시글 신고")
async def board_report(
    board_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    service: BoardService = Depends(deps.get_board_service),
):
    await service.board_report(session, board_id=board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
