"""
Module logging - Cung cấp hệ thống ghi log cho package.

Module này bao gồm:
- Formatters: Định dạng log messages (JSON, màu sắc)
- Filters: Che giấu thông tin nhạy cảm (password, token, captcha)
- Setup: Thiết lập logging cho ứng dụng
"""

from shiro_biz.logging.setup import get_logger, setup_logging
from shiro_biz.logging.formatters import JSONFormatter, ColorizedFormatter
from shiro_biz.logging.filters import SensitiveDataFilter

__all__ = [
    "get_logger",
    "setup_logging",
    "JSONFormatter",
    "ColorizedFormatter",
    "SensitiveDataFilter",
]
