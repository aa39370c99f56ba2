"""
Hệ thống cache - Cung cấp capability get/set cho captcha và các backend.

Module này bao gồm:
- Protocol: CaptchaCache, capability mà resolver phụ thuộc vào
- Backends: Memory, Redis
- Factory: tạo backend theo cấu hình
- Serializers: serialize/deserialize JSON cho backend phân tán
"""

from shiro_biz.cache.protocol import CaptchaCache
from shiro_biz.cache.backends.memory import MemoryBackend
from shiro_biz.cache.backends.redis import RedisBackend
from shiro_biz.cache.factory import get_cache_backend, CacheBackendType

__all__ = [
    "CaptchaCache",
    "MemoryBackend",
    "RedisBackend",
    "get_cache_backend",
    "CacheBackendType",
]
