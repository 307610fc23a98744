import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """루트 로거 설정 (development: DEBUG, 그 외: INFO, production은 파일 로그 추가)"""
    log_level = logging.DEBUG if settings.environment == "development" else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 재호출 시 핸들러 중복 방지
    for handler in list(root_logger.handlers):
        if getattr(handler, "_assessment_handler", False):
            root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if settings.environment == "production":
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.INFO)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._assessment_handler = True
        root_logger.addHandler(handler)

    # SQL 로그는 database_echo 설정으로만 노출
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    # 업로드 multipart 파서 디버그 로그 억제
    logging.getLogger("multipart").setLevel(logging.INFO)
    logging.getLogger("python_multipart").setLevel(logging.INFO)
