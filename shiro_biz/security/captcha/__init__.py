"""
Module bảo mật CAPTCHA - Lưu và xác minh captcha dựa trên cache.

Module này cung cấp:
- CaptchaCacheResolver: cấp và xác thực captcha có thời hạn
- CaptchaAuthenticationToken: token đăng nhập kèm captcha
- Dependency FastAPI để kiểm tra captcha của request
"""

from shiro_biz.security.captcha.token import CaptchaAuthenticationToken
from shiro_biz.security.captcha.resolver import (
    CAPTCHA_DATE_SESSION_ATTRIBUTE_NAME,
    CAPTCHA_SESSION_ATTRIBUTE_NAME,
    CaptchaCacheResolver,
)
from shiro_biz.security.captcha.dependencies import (
    get_captcha_resolver,
    verify_captcha,
)

__all__ = [
    "CAPTCHA_DATE_SESSION_ATTRIBUTE_NAME",
    "CAPTCHA_SESSION_ATTRIBUTE_NAME",
    "CaptchaAuthenticationToken",
    "CaptchaCacheResolver",
    "get_captcha_resolver",
    "verify_captcha",
]
