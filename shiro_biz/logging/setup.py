import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from shiro_biz.core.config import get_settings
from shiro_biz.logging.formatters import JSONFormatter, ColorizedFormatter
from shiro_biz.logging.filters import SensitiveDataFilter

__all__ = ["get_logger", "setup_logging"]

settings = get_settings()


def _build_formatter() -> logging.Formatter:
    if settings.LOG_JSON_FORMAT:
        return JSONFormatter()
    return ColorizedFormatter()


def _build_file_handler(name: str) -> RotatingFileHandler:
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Log bảo mật ghi vào file riêng
    if name.startswith("shiro_biz.security"):
        log_file = log_dir / "security.log"
    else:
        log_file = log_dir / "app.log"

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(JSONFormatter())
    return file_handler


def get_logger(name: str, extra: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Lấy logger với cấu hình thích hợp.

    Args:
        name: Tên logger
        extra: Thông tin bổ sung cho tất cả log message

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logging.LoggerAdapter(logger, extra) if extra else logger

    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(_build_formatter())
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if settings.APP_ENV == "production":
        file_handler = _build_file_handler(name)
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    if extra:
        return logging.LoggerAdapter(logger, extra)

    return logger


def setup_logging(level: Optional[str] = None) -> None:
    """
    Thiết lập logging cho ứng dụng.

    Args:
        level: Log level ghi đè LOG_LEVEL trong cấu hình
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(_build_formatter())
    console_handler.addFilter(SensitiveDataFilter())
    root_logger.addHandler(console_handler)

    if settings.APP_ENV == "production":
        root_logger.addHandler(_build_file_handler("root"))

    # Giảm log của các thư viện bên ngoài
    for noisy in ("uvicorn.access", "redis"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.info(f"Logging configured at level {logging.getLevelName(log_level)}")
