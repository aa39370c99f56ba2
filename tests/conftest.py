import pytest

from shiro_biz.cache.backends.memory import MemoryBackend
from shiro_biz.config import ShiroBizProperties
from shiro_biz.security.captcha.resolver import CaptchaCacheResolver


@pytest.fixture
def memory_cache():
    """Memory cache không chạy thread dọn dẹp."""
    return MemoryBackend(max_size=100, default_ttl=3600, cleanup_interval=0)


@pytest.fixture
def captcha_resolver(memory_cache):
    return CaptchaCacheResolver(memory_cache)


@pytest.fixture
def properties():
    return ShiroBizProperties()
