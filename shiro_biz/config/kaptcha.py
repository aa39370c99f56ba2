"""
Cấu hình Kaptcha: key lưu captcha và thời điểm tạo captcha.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shiro_biz.core import constants


class KaptchaConfig(BaseSettings):
    """
    Cấu hình Kaptcha.

    Attributes:
        SESSION_KEY: Key lưu nội dung captcha
        SESSION_DATE: Key lưu thời điểm tạo captcha
    """

    SESSION_KEY: str = Field(
        default=constants.KAPTCHA_SESSION_KEY, description="Key lưu nội dung captcha"
    )
    SESSION_DATE: str = Field(
        default=constants.KAPTCHA_SESSION_DATE,
        description="Key lưu thời điểm tạo captcha",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="KAPTCHA_",
        extra="ignore",
    )
