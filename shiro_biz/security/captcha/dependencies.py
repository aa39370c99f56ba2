"""
Dependency FastAPI cho captcha.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request

from shiro_biz.cache.factory import get_cache_backend
from shiro_biz.config import (
    ShiroBizProperties,
    get_kaptcha_config,
    get_shiro_properties,
)
from shiro_biz.core.exceptions import IncorrectCaptchaException
from shiro_biz.logging.setup import get_logger
from shiro_biz.security.captcha.resolver import CaptchaCacheResolver
from shiro_biz.security.captcha.token import CaptchaAuthenticationToken

logger = get_logger(__name__)

FORM_METHODS = ("POST", "PUT", "PATCH")


@lru_cache()
def get_captcha_resolver() -> CaptchaCacheResolver:
    """
    Tạo resolver dùng chung trên cache backend đã cấu hình.

    Returns:
        CaptchaCacheResolver
    """
    properties = get_shiro_properties()
    resolver = CaptchaCacheResolver(get_cache_backend())
    resolver.initialize_from(get_kaptcha_config())
    resolver.initialize(timeout=properties.CAPTCHA_TIMEOUT)
    return resolver


async def _read_captcha(request: Request, param_name: str) -> Optional[str]:
    value = request.query_params.get(param_name)
    if value is None and request.method in FORM_METHODS:
        form = await request.form()
        form_value = form.get(param_name)
        if isinstance(form_value, str):
            value = form_value
    return value


async def verify_captcha(
    request: Request,
    resolver: CaptchaCacheResolver = Depends(get_captcha_resolver),
    properties: ShiroBizProperties = Depends(get_shiro_properties),
) -> None:
    """
    Kiểm tra captcha của request khi CAPTCHA_ENABLED bật.

    Args:
        request: Request hiện tại
        resolver: Captcha resolver
        properties: Cấu hình Shiro

    Raises:
        IncorrectCaptchaException: Captcha thiếu hoặc không khớp
        InvalidCaptchaException: Captcha đã hết hạn
    """
    if not properties.CAPTCHA_ENABLED:
        return

    token = CaptchaAuthenticationToken(
        captcha=await _read_captcha(request, properties.CAPTCHA_PARAM_NAME) or "",
        host=request.client.host if request.client else None,
    )

    if not await resolver.validate_token(request, token):
        logger.warning(f"Captcha mismatch from host {token.host}")
        raise IncorrectCaptchaException()
