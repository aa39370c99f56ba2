"""
Cache backends - Cung cấp các backend lưu trữ cache.

Các backend hỗ trợ:
- Memory: Backend lưu trong bộ nhớ, phù hợp cho development và single-server
- Redis: Backend phân tán sử dụng Redis
"""

from shiro_biz.cache.backends.memory import MemoryBackend
from shiro_biz.cache.backends.redis import RedisBackend

__all__ = ["MemoryBackend", "RedisBackend"]
