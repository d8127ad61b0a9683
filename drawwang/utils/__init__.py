# drawwang/utils/__init__.py

"""
drawwang 애플리케이션의 'utils' 패키지입니다.

특정 비즈니스 도메인에 속하지 않는 범용 유틸리티를 포함합니다.

주요 서브모듈:
- `files.py`: 이미지 업로드 저장, 이미지 ID -> 경로 변환 (FileStore).
"""

# flake8: noqa
from . import files

__title__ = "drawwang Application Utilities"
__description__ = "Provides common, reusable utility functions for the application."
__version__ = "0.1.0"
__all__ = ["files"]
