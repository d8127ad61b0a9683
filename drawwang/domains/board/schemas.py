# drawwang/domains/board/schemas.py

from typing import Optional
from pydantic import BaseModel, Field


class BoardSubmitRequest(BaseModel):
    """
    게시글 작성 요청입니다. (파일은 multipart로 별도 전달)
    """
    user_name: str = Field(..., min_length=1, max_length=50, description="작성자 이름")
    thread_id: int = Field(..., description="게시글을 작성할 스레드 ID")


class BoardResponse(BaseModel):
    """
    게시글 목록 조회 시 반환되는 요약 정보입니다.
    """
    id: int
    user_name: str
    thread_id: int
    image_path: Optional[str] = Field(None, description="이미지 웹 경로 (첨부 이미지가 없으면 null)")
    likes: int
    reports: int
