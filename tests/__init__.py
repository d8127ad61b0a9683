# tests/__init__.py

"""
drawwang API의 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 엔진, 테스트 세션, 비동기 테스트 클라이언트 등 공용 픽스처.
- `domains/`: 스레드/게시글 도메인별 API 및 서비스 테스트.
- 그 외 최상위 모듈: 이벤트 발행기, 파일 저장소, ARQ 태스크 등 core 구성 요소 테스트.
"""

__title__ = "drawwang API Tests"
__description__ = "Test suite for drawwang FastAPI application."
__version__ = "0.1.0"
__all__ = []
