# drawwang/__init__.py

"""
drawwang 게시판 FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 스레드(Thread)와 그 안에 작성되는 게시글(Board)을 다루는
백엔드 API를 포함합니다. 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 이벤트 발행을 담는 core 서브패키지,
그리고 각 비즈니스 도메인을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "drawwang API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Thread board API backend (posts, likes, reports, images)."
__all__ = []
