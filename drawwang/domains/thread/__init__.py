# drawwang/domains/thread/__init__.py

"""
'thread' 도메인 패키지입니다.

스레드는 게시글(Board)이 속하는 부모 컨테이너이며,
이 패키지는 스레드의 모델, 스키마, CRUD, API 엔드포인트를 포함합니다.

주요 서브모듈:
- `models.py`: threads 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사용 모델.
- `crud.py`: threads 테이블 CRUD 로직.
- `routers.py`: 스레드 API 엔드포인트 정의.
"""

__title__ = "drawwang Thread Domain"
__description__ = "Manages threads, the parent containers of boards."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "routers", "crud"]
