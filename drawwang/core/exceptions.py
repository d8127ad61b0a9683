# drawwang/core/exceptions.py

"""
애플리케이션 공통 에러 코드와 도메인 예외를 정의하는 모듈입니다.

서비스 계층은 `CustomException` 계열 예외만 발생시키고,
HTTP 상태 코드로의 변환은 `install_error_handlers()`가 등록한 핸들러가 담당합니다.
"""

from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    """호출자에게 노출되는 고정 에러 코드"""
    THREAD_NOT_FOUND_ERROR = "THREAD_NOT_FOUND_ERROR"
    BOARD_NOT_FOUND_ERROR = "BOARD_NOT_FOUND_ERROR"
    INVALID_IMAGE_FILE_ERROR = "INVALID_IMAGE_FILE_ERROR"
    EMPTY_FILE_ERROR = "EMPTY_FILE_ERROR"


# 에러 코드 -> (HTTP 상태 코드, 기본 메시지)
ERROR_RESPONSES = {
    ErrorCode.THREAD_NOT_FOUND_ERROR: (status.HTTP_404_NOT_FOUND, "Thread not found."),
    ErrorCode.BOARD_NOT_FOUND_ERROR: (status.HTTP_404_NOT_FOUND, "Board not found."),
    ErrorCode.INVALID_IMAGE_FILE_ERROR: (status.HTTP_400_BAD_REQUEST, "Unsupported image file type."),
    ErrorCode.EMPTY_FILE_ERROR: (status.HTTP_400_BAD_REQUEST, "Uploaded file is empty."),
}


class CustomException(Exception):
    """에러 코드를 가진 애플리케이션 예외의 기반 클래스입니다."""

    def __init__(self, error_code: ErrorCode, detail: Optional[str] = None):
        self.error_code = error_code
        self.status_code, default_detail = ERROR_RESPONSES[error_code]
        self.detail = detail or default_detail
        super().__init__(self.detail)


class ThreadNotFound(CustomException):
    def __init__(self, thread_id: Optional[Any] = None):
        detail = f"Thread with ID {thread_id} not found." if thread_id is not None else None
        super().__init__(ErrorCode.THREAD_NOT_FOUND_ERROR, detail)


class BoardNotFound(CustomException):
    def __init__(self, board_id: Optional[Any] = None):
        detail = f"Board with ID {board_id} not found." if board_id is not None else None
        super().__init__(ErrorCode.BOARD_NOT_FOUND_ERROR, detail)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustomException)
    async def custom_exc_handler(request: Request, exc: CustomException):  # type: ignore[override]
        payload = {"code": exc.error_code.value, "detail": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)
