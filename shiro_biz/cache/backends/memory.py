import re
import threading
import time
from typing import Any, Dict, Optional, Tuple

from shiro_biz.logging.setup import get_logger

logger = get_logger(__name__)


class MemoryBackend:
    """
    In-memory cache backend.
    Useful cho development và single-server deployments.
    """

    def __init__(
        self, max_size: int = 1000, default_ttl: int = 3600, cleanup_interval: int = 60
    ):
        """
        Khởi tạo memory cache backend.

        Args:
            max_size: Maximum number of items in cache, <= 0 means unbounded
            default_ttl: Default time to live in seconds
            cleanup_interval: Interval for cleanup task in seconds, 0 disables it
        """
        # key -> (value, expires_at, stored_at)
        self._cache: Dict[str, Tuple[Any, float, float]] = {}
        self._max_size = max_size
        self._default_ttl = default_ttl
        self._cleanup_interval = cleanup_interval
        self._lock = threading.RLock()

        if cleanup_interval > 0:
            self._start_cleanup_task()

    def _start_cleanup_task(self) -> None:
        """Start periodic cleanup task to remove expired items."""

        def cleanup():
            while True:
                time.sleep(self._cleanup_interval)
                self._cleanup_expired()

        threading.Thread(target=cleanup, daemon=True).start()

    def _cleanup_expired(self) -> int:
        """Remove expired items from cache."""
        now = time.time()

        with self._lock:
            expired_keys = [
                key for key, (_, expiry, _) in self._cache.items() if expiry <= now
            ]
            for key in expired_keys:
                del self._cache[key]

        if expired_keys:
            logger.debug(f"Removed {len(expired_keys)} expired cache entries")
        return len(expired_keys)

    def _evict_if_full(self) -> None:
        """Evict oldest item if cache is full."""
        if self._max_size <= 0 or len(self._cache) < self._max_size:
            return

        oldest_key = min(self._cache, key=lambda k: self._cache[k][2])
        del self._cache[oldest_key]
        logger.debug(f"Evicted cache key {oldest_key}")

    async def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache.

        Args:
            key: Cache key
            default: Default value if key not found

        Returns:
            Cached value or default
        """
        with self._lock:
            if key not in self._cache:
                return default

            value, expiry, _ = self._cache[key]

            if expiry <= time.time():
                del self._cache[key]
                return default

            return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds

        Returns:
            Whether operation was successful
        """
        with self._lock:
            if key not in self._cache:
                self._evict_if_full()

            now = time.time()
            expires_at = now + (ttl if ttl is not None else self._default_ttl)
            self._cache[key] = (value, expires_at, now)

            return True

    async def delete(self, key: str) -> bool:
        """
        Delete value from cache.

        Args:
            key: Cache key

        Returns:
            Whether key was deleted
        """
        with self._lock:
            return self._cache.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        with self._lock:
            if key not in self._cache:
                return False

            _, expiry, _ = self._cache[key]
            if expiry <= time.time():
                del self._cache[key]
                return False

            return True

    async def clear(self, pattern: Optional[str] = None) -> int:
        """
        Clear cache by pattern.

        Args:
            pattern: Glob-style key pattern to clear

        Returns:
            Number of keys deleted
        """
        with self._lock:
            if not pattern or pattern == "*":
                count = len(self._cache)
                self._cache.clear()
                return count

            pattern_regex = re.escape(pattern).replace("\\*", ".*")
            regex = re.compile(f"^{pattern_regex}$")

            matching_keys = [key for key in self._cache if regex.match(key)]
            for key in matching_keys:
                del self._cache[key]

            return len(matching_keys)
