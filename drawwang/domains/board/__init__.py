# drawwang/domains/board/__init__.py

"""
'board' 도메인 패키지입니다.

게시글 작성(이미지 첨부 포함), 목록 조회, 좋아요, 신고 기능과
게시글 관련 도메인 이벤트를 다룹니다.

주요 서브모듈:
- `models.py`: boards 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 작성 요청 및 목록 응답 모델.
- `crud.py`: boards 테이블 CRUD 로직 (원자적 카운터 증가 포함).
- `services.py`: BoardService (트랜잭션, 파일 저장, 이벤트 발행 조합).
- `events.py`: SubmittedBoardEvent, BoardLikedEvent.
- `listeners.py`: 기본 이벤트 리스너.
- `routers.py`: 게시글 API 엔드포인트 정의.
"""

# 순환 임포트를 피하기 위해 서브모듈은 여기서 임포트하지 않습니다.
# 명시적인 임포트 (예: from drawwang.domains.board import services)를 사용합니다.

__title__ = "drawwang Board Domain"
__description__ = "Board posts within threads: submit, list, like, report."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "services", "events", "listeners", "routers"]
