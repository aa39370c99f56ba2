"""
Xác thực captcha (Kaptcha) dựa trên cache.

Nội dung captcha và thời điểm tạo được lưu vào cache dưới hai key riêng.
Thời điểm tạo lưu dạng epoch milliseconds để mọi backend đều giữ nguyên kiểu.
"""

import time
from datetime import datetime
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import Response

from shiro_biz.cache.protocol import CaptchaCache
from shiro_biz.config.kaptcha import KaptchaConfig
from shiro_biz.core.constants import DEFAULT_CAPTCHA_TIMEOUT
from shiro_biz.core.exceptions import (
    CaptchaIncorrectException,
    CaptchaTimeoutException,
    IncorrectCaptchaException,
    InvalidCaptchaException,
)
from shiro_biz.logging.setup import get_logger
from shiro_biz.security.captcha.token import CaptchaAuthenticationToken

logger = get_logger(__name__)

CAPTCHA_SESSION_ATTRIBUTE_NAME = f"{__name__}.CaptchaCacheResolver.Captcha"
CAPTCHA_DATE_SESSION_ATTRIBUTE_NAME = f"{__name__}.CaptchaCacheResolver.Captcha_DATE"


def _now_millis() -> int:
    return int(time.time() * 1000)


def _to_millis(value: Any) -> Optional[int]:
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return None


class CaptchaCacheResolver:
    """
    Validates a time-boxed captcha against values held in an injected cache.

    The resolver keeps no per-request state: only the two cache keys and the
    timeout (milliseconds). Eviction of old captchas is left to the cache.
    """

    def __init__(self, captcha_cache: CaptchaCache):
        self.captcha_cache = captcha_cache
        self.captcha_store_key = CAPTCHA_SESSION_ATTRIBUTE_NAME
        self.captcha_date_store_key = CAPTCHA_DATE_SESSION_ATTRIBUTE_NAME
        self.captcha_timeout = DEFAULT_CAPTCHA_TIMEOUT

    def initialize_from(self, config: KaptchaConfig) -> None:
        """
        Lấy key lưu captcha từ cấu hình Kaptcha.

        Args:
            config: Cấu hình Kaptcha; key rỗng được bỏ qua
        """
        self.initialize(config.SESSION_KEY, config.SESSION_DATE)

    def initialize(
        self,
        store_key: Optional[str] = None,
        date_key: Optional[str] = None,
        timeout: int = 0,
    ) -> None:
        """
        Ghi đè key lưu captcha và thời gian hiệu lực.

        Args:
            store_key: Key lưu nội dung captcha, bỏ qua nếu rỗng
            date_key: Key lưu thời điểm tạo captcha, bỏ qua nếu rỗng
            timeout: Thời gian hiệu lực (ms), bỏ qua nếu <= 0
        """
        if store_key:
            self.captcha_store_key = store_key
        if date_key:
            self.captcha_date_store_key = date_key
        if timeout and timeout > 0:
            self.captcha_timeout = timeout

    async def validate_token(
        self, request: Optional[Request], token: CaptchaAuthenticationToken
    ) -> bool:
        """
        Xác thực captcha gửi kèm token đăng nhập.

        Args:
            request: Request hiện tại
            token: Token đăng nhập chứa captcha

        Returns:
            bool: True nếu captcha khớp với captcha đã cấp

        Raises:
            IncorrectCaptchaException: Captcha rỗng hoặc chưa được cấp
            InvalidCaptchaException: Captcha đã hết hạn
        """
        if not token.captcha:
            logger.warning("Captcha verification failed: empty captcha")
            raise IncorrectCaptchaException()

        try:
            return await self.validate(request, token.captcha)
        except CaptchaIncorrectException as e:
            raise IncorrectCaptchaException() from e
        except CaptchaTimeoutException as e:
            raise InvalidCaptchaException() from e

    async def validate(self, request: Optional[Request], text: Optional[str]) -> bool:
        """
        Xác thực captcha với giá trị đã lưu trong cache.

        Args:
            request: Request hiện tại
            text: Captcha người dùng nhập

        Returns:
            bool: True nếu khớp (không phân biệt hoa thường)

        Raises:
            CaptchaIncorrectException: Captcha rỗng hoặc chưa được cấp
            CaptchaTimeoutException: Captcha đã hết hạn
        """
        if not text:
            logger.warning("Captcha verification failed: empty captcha")
            raise CaptchaIncorrectException("Captcha is empty")

        stored_text = await self.captcha_cache.get(self.captcha_store_key)
        if not stored_text:
            logger.warning("Captcha verification failed: no captcha issued")
            raise CaptchaIncorrectException("No captcha has been issued")

        # Thiếu thời điểm tạo thì coi như đã hết hạn
        stored_at = _to_millis(await self.captcha_cache.get(self.captcha_date_store_key))
        if stored_at is None or _now_millis() - stored_at > self.captcha_timeout:
            logger.warning("Captcha verification failed: captcha expired")
            raise CaptchaTimeoutException("Captcha has expired")

        matched = str(stored_text).casefold() == text.casefold()
        if not matched:
            logger.info("Captcha verification failed: captcha mismatch")
        return matched

    async def issue(
        self,
        request: Optional[Request],
        response: Optional[Response],
        text: Optional[str],
        date: Optional[datetime] = None,
    ) -> None:
        """
        Lưu captcha vừa tạo và thời điểm tạo vào cache.

        Args:
            request: Request hiện tại
            response: Response sẽ trả về
            text: Nội dung captcha; rỗng thì lưu None
            date: Thời điểm tạo, mặc định là hiện tại
        """
        await self.captcha_cache.set(self.captcha_store_key, text if text else None)
        await self.captcha_cache.set(
            self.captcha_date_store_key,
            _to_millis(date) if date is not None else _now_millis(),
        )
        logger.debug("Captcha issued")
