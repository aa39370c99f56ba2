"""CaptchaCache protocol: the resolver depends on this, not on a concrete backend."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class CaptchaCache(Protocol):
    async def get(self, key: str, default: Any = None) -> Any: ...

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool: ...
