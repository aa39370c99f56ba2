from enum import Enum
from typing import Optional, Union

from shiro_biz.cache.backends.memory import MemoryBackend
from shiro_biz.cache.backends.redis import RedisBackend
from shiro_biz.core.config import get_settings
from shiro_biz.core.exceptions import CacheException
from shiro_biz.logging.setup import get_logger

settings = get_settings()
logger = get_logger(__name__)


class CacheBackendType(str, Enum):
    """Các loại backend cache."""

    REDIS = "redis"
    MEMORY = "memory"


def get_cache_backend(
    backend_name: Optional[str] = None, fallback: bool = True, **kwargs
) -> Union[MemoryBackend, RedisBackend]:
    """
    Tạo cache backend dựa trên tên.

    Args:
        backend_name: Tên backend cache, mặc định lấy từ CACHE_BACKEND
        fallback: Dùng memory cache khi không tạo được backend yêu cầu
        **kwargs: Các tham số bổ sung cho backend

    Returns:
        Cache backend object

    Raises:
        CacheException: Không tạo được backend và fallback tắt
    """
    backend_type = backend_name or settings.CACHE_BACKEND

    if backend_type == CacheBackendType.REDIS:
        try:
            return RedisBackend(
                redis_client=kwargs.get("redis_client"),
                redis_url=kwargs.get("redis_url"),
                key_prefix=kwargs.get("key_prefix", settings.CACHE_KEY_PREFIX),
                default_ttl=kwargs.get("default_ttl", settings.CACHE_DEFAULT_TTL),
            )
        except ValueError as e:
            if not fallback:
                raise CacheException(
                    f"Không tạo được cache backend '{backend_type}'"
                ) from e
            logger.error(f"Lỗi khi tạo cache backend '{backend_type}': {str(e)}")
    elif backend_type != CacheBackendType.MEMORY:
        if not fallback:
            raise CacheException(f"Không hỗ trợ cache backend '{backend_type}'")
        logger.warning(
            f"Sử dụng memory cache vì không tìm thấy backend '{backend_type}'"
        )

    return MemoryBackend(
        max_size=kwargs.get("max_size", settings.MEMORY_CACHE_MAX_SIZE),
        default_ttl=kwargs.get("default_ttl", settings.MEMORY_CACHE_DEFAULT_TTL),
        cleanup_interval=kwargs.get(
            "cleanup_interval", settings.MEMORY_CACHE_CLEANUP_INTERVAL
        ),
    )
