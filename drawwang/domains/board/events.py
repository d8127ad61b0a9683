# drawwang/domains/board/events.py

from dataclasses import dataclass

from drawwang.core.events import DomainEvent
from drawwang.domains.board.models import Board
from drawwang.domains.thread.models import Thread


@dataclass(frozen=True)
class SubmittedBoardEvent(DomainEvent):
    """새 게시글이 스레드에 작성되었음을 알립니다."""
    thread: Thread
    board: Board


@dataclass(frozen=True)
class BoardLikedEvent(DomainEvent):
    """게시글의 좋아요 수가 증가했음을 알립니다. board는 갱신된 상태입니다."""
    board: Board
