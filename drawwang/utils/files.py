# drawwang/utils/files.py

import logging
import uuid
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import UploadFile

from drawwang.core.config import settings
from drawwang.core.exceptions import CustomException, ErrorCode

logger = logging.getLogger(__name__)


class FileStore:
    """
    업로드된 이미지를 UPLOAD_DIR에 저장하고, 불투명한 이미지 ID로 다시 찾아주는 저장소입니다.

    - 이미지 ID는 "<uuid4><확장자>" 형태의 파일명이며 그 자체가 디스크 상의 상대 경로입니다.
    - 웹에서는 IMAGES_URL_PREFIX 아래로 제공됩니다. (예: "/images/<uuid>.png")
    """

    # 경로는 호출 시점에 settings에서 읽습니다. (monkeypatch로 변경된 값을 반영하기 위함)
    @property
    def upload_dir(self) -> Path:
        return Path(settings.UPLOAD_DIR)

    async def store_file(self, upload_file: Optional[UploadFile]) -> Optional[str]:
        """
        업로드 파일을 저장하고 이미지 ID를 반환합니다.
        파일이 첨부되지 않은 경우(None 또는 빈 파일명) None을 반환합니다.
        """
        if upload_file is None or not upload_file.filename:
            return None

        #  1. 이미지 확장자 검사
        file_extension = Path(upload_file.filename).suffix.lower()
        if file_extension not in settings.ALLOWED_IMAGE_EXTENSIONS:
            raise CustomException(ErrorCode.INVALID_IMAGE_FILE_ERROR)

        #  2. 파일 내용 읽기
        file_content = await upload_file.read()
        if not file_content:
            raise CustomException(ErrorCode.EMPTY_FILE_ERROR)

        #  3. 고유한 파일명(=이미지 ID) 생성 후 비동기 저장
        upload_directory = self.upload_dir
        upload_directory.mkdir(parents=True, exist_ok=True)
        image_id = f"{uuid.uuid4()}{file_extension}"

        async with aiofiles.open(upload_directory / image_id, "wb") as f:
            await f.write(file_content)

        logger.debug("Stored image %s (%d bytes)", image_id, len(file_content))
        return image_id

    def get_full_image_path(self, image_id: str) -> Path:
        """이미지 ID로 전체 파일 시스템 경로를 반환합니다."""
        return self.upload_dir / image_id

    def get_partial_images_path(self, image_id: Optional[str]) -> Optional[str]:
        """이미지 ID를 웹 접근 경로로 변환합니다. 이미지가 없으면 None."""
        if not image_id:
            return None
        return f"{settings.IMAGES_URL_PREFIX.rstrip('/')}/{image_id}"

    async def delete_file(self, image_id: Optional[str]) -> bool:
        """저장된 이미지를 삭제합니다. 실제로 삭제되었으면 True."""
        if not image_id:
            return False
        full_path = self.get_full_image_path(image_id)
        if not full_path.exists():
            return False
        full_path.unlink()
        logger.info("Deleted image %s", image_id)
        return True


file_store = FileStore()
