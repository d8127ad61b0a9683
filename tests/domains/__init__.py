# tests/domains/__init__.py

"""
도메인별 테스트 패키지입니다.

- `test_thread_n.py`: 스레드 생성/조회 API 테스트.
- `test_board_n.py`: 게시글 작성, 목록, 좋아요, 신고 API 테스트.
- `test_board_service_n.py`: BoardService 계층 테스트.
"""

__title__ = "drawwang Domain Tests"
__all__ = []
