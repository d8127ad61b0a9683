# drawwang/domains/board/listeners.py

"""
게시글 도메인 이벤트의 기본 리스너들입니다.
main.py에서 임포트되는 시점에 전역 publisher에 등록됩니다.
"""

import logging

from drawwang.core.events import publisher
from .events import BoardLikedEvent, SubmittedBoardEvent

logger = logging.getLogger(__name__)


@publisher.listener(SubmittedBoardEvent)
def notify_board_submitted(event: SubmittedBoardEvent) -> None:
    logger.info(
        "[notify] New board %s in thread %s ('%s')",
        event.board.id, event.thread.id, event.thread.title,
    )


@publisher.listener(BoardLikedEvent)
def notify_board_liked(event: BoardLikedEvent) -> None:
    logger.info("[notify] Board %s now has %s like(s)", event.board.id, event.board.likes)
