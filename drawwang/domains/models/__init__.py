# drawwang/domains/models/__init__.py

"""
모든 도메인의 SQLModel 모델들을 한 곳에서 임포트하여,
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
"""

from drawwang.domains.thread.models import Thread
from drawwang.domains.board.models import Board

__all__ = ["Thread", "Board"]
