# drawwang/domains/thread/models.py

from typing import TYPE_CHECKING, List, Optional
from datetime import datetime, UTC

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, Relationship, SQLModel, Column

# 순환 참조 방지를 위해 TYPE_CHECKING 블록 내에서만 임포트합니다.
if TYPE_CHECKING:
    from drawwang.domains.board.models import Board


class ThreadBase(SQLModel):
    """
    스레드의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    title: str = Field(index=True, max_length=100, description="스레드 제목")


class Thread(ThreadBase, table=True):
    """
    threads 테이블 모델입니다. 게시글(Board)이 속하는 부모 컨테이너입니다.
    """
    __tablename__ = "threads"

    id: Optional[int] = Field(default=None, primary_key=True, description="스레드 고유 ID")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    boards: List["Board"] = Relationship(back_populates="thread")
