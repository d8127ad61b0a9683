# drawwang/domains/__init__.py

"""
drawwang 애플리케이션의 비즈니스 도메인 패키지입니다.

- `thread/`: 게시글이 속하는 스레드.
- `board/`: 스레드에 작성되는 게시글과 좋아요/신고, 도메인 이벤트.
- `models/`: 모든 도메인의 SQLModel 모델을 한 곳에서 임포트하는 집합 모듈.
"""

__all__ = []
