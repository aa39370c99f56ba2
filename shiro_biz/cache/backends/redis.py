from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shiro_biz.cache.serializers import serialize, deserialize
from shiro_biz.core.config import get_settings
from shiro_biz.logging.setup import get_logger

settings = get_settings()
logger = get_logger(__name__)


class RedisBackend:
    """
    Redis cache backend cho cache phân tán.
    Giá trị được serialize bằng JSON, mỗi key có time-to-live.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        redis_url: Optional[str] = None,
        key_prefix: str = settings.CACHE_KEY_PREFIX,
        default_ttl: int = settings.CACHE_DEFAULT_TTL,
    ):
        """
        Khởi tạo Redis cache backend.

        Args:
            redis_client: Redis client
            redis_url: Redis URL, mặc định lấy từ cấu hình
            key_prefix: Cache key prefix
            default_ttl: Default time to live in seconds
        """
        self.client = redis_client

        if self.client is None:
            self.client = redis.from_url(redis_url or settings.get_redis_url())

        self.key_prefix = key_prefix
        self.default_ttl = default_ttl

    def _get_full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache.

        Args:
            key: Cache key
            default: Default value if key not found

        Returns:
            Cached value or default
        """
        try:
            cached_value = await self.client.get(self._get_full_key(key))

            if cached_value is None:
                return default

            return deserialize(cached_value)

        except RedisError as e:
            logger.error(f"Error getting from cache: {e}")
            return default

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds

        Returns:
            Whether the operation was successful
        """
        try:
            await self.client.setex(
                self._get_full_key(key), ttl or self.default_ttl, serialize(value)
            )
            return True

        except (RedisError, TypeError, ValueError) as e:
            logger.error(f"Error setting cache: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """
        Delete value from cache.

        Args:
            key: Cache key

        Returns:
            Whether a key was deleted
        """
        try:
            return bool(await self.client.delete(self._get_full_key(key)))

        except RedisError as e:
            logger.error(f"Error deleting from cache: {e}")
            return False

    async def exists(self, key: str) -> bool:
        try:
            return bool(await self.client.exists(self._get_full_key(key)))

        except RedisError as e:
            logger.error(f"Error checking cache key: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()
