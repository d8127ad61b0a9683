# drawwang/domains/board/crud.py

"""
'board' 도메인의 데이터 접근 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from drawwang.core.crud_base import CRUDBase
from . import models, schemas


class CRUDBoard(CRUDBase[models.Board, schemas.BoardSubmitRequest]):
    COUNTER_FIELDS = ("likes", "reports")

    def __init__(self):
        super().__init__(model=models.Board)

    async def get_all(self, db: AsyncSession, *, thread_id: Optional[int] = None) -> List[models.Board]:
        """모든 게시글을 생성 순서(id 오름차순)대로 조회합니다."""
        statement = select(self.model).order_by(self.model.id)
        if thread_id is not None:
            statement = statement.where(self.model.thread_id == thread_id)
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def increment(self, db: AsyncSession, *, id: int, field: str) -> bool:
        """
        카운터 필드(likes/reports)를 단일 UPDATE 문으로 1 증가시킵니다.
        동시 요청에서도 증가분이 유실되지 않도록 DB가 직접 계산합니다.
        대상 레코드가 없으면 False를 반환합니다.
        """
        if field not in self.COUNTER_FIELDS:
            raise ValueError(f"'{field}' is not a counter field of {self.model.__name__}")

        column = getattr(self.model, field)
        statement = (
            update(self.model)
            .where(self.model.id == id)
            .values({field: column + 1})
        )
        result = await db.execute(statement)
        return result.rowcount > 0


board = CRUDBoard()
