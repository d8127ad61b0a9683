# drawwang/domains/board/models.py

from typing import TYPE_CHECKING, Optional
from datetime import datetime, UTC

from sqlalchemy import CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, Relationship, SQLModel, Column

if TYPE_CHECKING:
    from drawwang.domains.thread.models import Thread


class Board(SQLModel, table=True):
    """
    boards 테이블 모델입니다. 스레드에 작성된 게시글 하나를 나타냅니다.

    - image_id는 생성 시에만 설정되며 이후 변경되지 않습니다.
    - likes, reports는 생성 후 변경 가능한 유일한 필드이며 증가만 합니다.
    """
    __tablename__ = "boards"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_boards_likes_non_negative"),
        CheckConstraint("reports >= 0", name="ck_boards_reports_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True, description="게시글 고유 ID")
    user_name: str = Field(max_length=50, description="작성자 이름")
    thread_id: int = Field(foreign_key="threads.id", index=True, description="소속 스레드 ID")
    image_id: Optional[str] = Field(default=None, max_length=255, description="첨부 이미지 ID (FileStore)")
    likes: int = Field(default=0, nullable=False, description="좋아요 수")
    reports: int = Field(default=0, nullable=False, description="신고 수")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    thread: Optional["Thread"] = Relationship(back_populates="boards")
