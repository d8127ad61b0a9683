# drawwang/core/__init__.py

"""
drawwang 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리, 트랜잭션 단위(UnitOfWork).
- `crud_base.py`: 공통 CRUD 기본 클래스.
- `events.py`: 프로세스 내부 도메인 이벤트 발행/구독.
- `exceptions.py`: 에러 코드와 도메인 예외, FastAPI 예외 핸들러.
- `dependencies.py`: FastAPI 의존성 주입 함수들.
- `tasks.py`: ARQ 워커가 실행하는 공통 태스크.
"""

__title__ = "drawwang Core"
__description__ = "Core components for drawwang FastAPI application."
__version__ = "0.1.0"
__all__ = []
