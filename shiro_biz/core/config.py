from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings shared by logging and the cache layer."""

    # App config
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_JSON_FORMAT: bool = False
    LOG_MAX_BYTES: int = 10485760  # 10MB
    LOG_BACKUP_COUNT: int = 5

    # Cache settings
    CACHE_BACKEND: str = Field(
        default="memory", description="Backend cache: memory, redis"
    )
    CACHE_KEY_PREFIX: str = "shiro:"
    CACHE_DEFAULT_TTL: int = 3600  # seconds
    MEMORY_CACHE_MAX_SIZE: int = 10000
    MEMORY_CACHE_DEFAULT_TTL: int = 3600  # seconds
    MEMORY_CACHE_CLEANUP_INTERVAL: int = 60  # seconds

    # Redis
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def get_redis_url(self) -> str:
        """
        Lấy URL Redis.

        Returns:
            URL Redis
        """
        auth_part = f":{self.REDIS_PASSWORD}@" if self.REDIS_PASSWORD else ""
        return f"redis://{auth_part}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
