import logging
import time
from pathlib import Path

from fastapi import UploadFile

from app.core.config import settings

logger = logging.getLogger(__name__)


def _reserve_path(upload_dir: Path, extension: str) -> Path:
    """업로드 시각(ms) + 원본 확장자로 파일 경로 결정 (충돌 시 1ms씩 증가)"""
    timestamp = int(time.time() * 1000)
    path = upload_dir / f"{timestamp}{extension}"
    while path.exists():
        timestamp += 1
        path = upload_dir / f"{timestamp}{extension}"
    return path


async def save_upload(file: UploadFile | None) -> str | None:
    """업로드 파일을 공개 정적 경로에 저장하고 URL 경로 반환"""
    if file is None or not file.filename:
        return None

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    extension = Path(file.filename).suffix.lower()
    path = _reserve_path(upload_dir, extension)
    content = await file.read()
    path.write_bytes(content)

    public_path = f"{settings.upload_url_prefix.rstrip('/')}/{path.name}"
    logger.info(f"파일 업로드 저장: filename={file.filename}, path={public_path}, size={len(content)}")
    return public_path


def remove_upload(public_path: str | None) -> None:
    """저장에 실패한 요청의 업로드 파일 정리"""
    if not public_path:
        return
    path = Path(settings.upload_dir) / Path(public_path).name
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"업로드 파일 삭제 실패: path={path}, error={e}")
