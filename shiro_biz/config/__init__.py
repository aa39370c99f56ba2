"""
Module cấu hình bảo mật.

Module này export các cấu hình:
- ShiroBizProperties: cấu hình session, cache, filter chain, captcha (SHIRO_*)
- KaptchaConfig: key lưu captcha (KAPTCHA_*)
"""

from functools import lru_cache

from shiro_biz.config.shiro import (
    CACHING_SUB_FLAGS,
    ShiroBizProperties,
    couple_caching_flags,
)
from shiro_biz.config.kaptcha import KaptchaConfig


@lru_cache()
def get_shiro_properties() -> ShiroBizProperties:
    """
    Get cached Shiro properties instance.

    Returns:
        ShiroBizProperties instance
    """
    return ShiroBizProperties()


@lru_cache()
def get_kaptcha_config() -> KaptchaConfig:
    return KaptchaConfig()


__all__ = [
    "CACHING_SUB_FLAGS",
    "ShiroBizProperties",
    "KaptchaConfig",
    "couple_caching_flags",
    "get_shiro_properties",
    "get_kaptcha_config",
]
