# drawwang/domains/thread/schemas.py

from typing import List, Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from drawwang.domains.board import schemas as board_schemas


class ThreadCreate(SQLModel):
    """새로운 스레드를 생성하기 위한 스키마입니다."""
    title: str = Field(..., min_length=1, max_length=100, description="스레드 제목")


class ThreadRead(SQLModel):
    id: int
    title: str
    created_at: Optional[datetime] = None


class ThreadReadWithBoards(ThreadRead):
    boards: List[board_schemas.BoardResponse] = []
