"""
Cấu hình Shiro.

Module này định nghĩa các cấu hình cho tầng bảo mật kiểu Shiro:
- Session: timeout, validation scheduler, kickout
- Cache: tên các cache và cờ bật/tắt cache
- Filter chain: ánh xạ URL pattern -> tên filter chain
- Captcha: bật/tắt, tên tham số, thời gian hiệu lực
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shiro_biz.core import constants

CACHING_SUB_FLAGS = (
    "AUTHORIZATION_CACHING_ENABLED",
    "AUTHENTICATION_CACHING_ENABLED",
    "SESSION_CACHING_ENABLED",
)


def couple_caching_flags(caching_enabled: bool, *sub_flags: bool) -> bool:
    """
    Compute the master caching flag from its current value and the sub-flags.

    Turning on any sub-flag turns the master flag on. Turning a sub-flag off
    never turns the master flag off.

    Args:
        caching_enabled: Current value of the master flag
        *sub_flags: Values of the authorization/authentication/session flags

    Returns:
        New value of the master flag
    """
    return bool(caching_enabled) or any(sub_flags)


def default_filter_chain_definitions() -> Dict[str, str]:
    return {pattern: constants.ANON_CHAIN for pattern in constants.DEFAULT_IGNORED}


class ShiroBizProperties(BaseSettings):
    """
    Cấu hình Shiro, bind từ các biến môi trường SHIRO_*.

    Thời gian tính bằng mili giây. Các cờ *_CACHING_ENABLED giữ giá trị đã cấu
    hình; giá trị hiệu lực lấy qua các hàm is_*_caching_enabled().
    """

    PREFIX: ClassVar[str] = "shiro"
    DEFAULT_CAPTCHA_TIMEOUT: ClassVar[int] = constants.DEFAULT_CAPTCHA_TIMEOUT
    DEFAULT_GLOBAL_SESSION_TIMEOUT: ClassVar[int] = constants.DEFAULT_GLOBAL_SESSION_TIMEOUT
    DEFAULT_SESSION_VALIDATION_INTERVAL: ClassVar[int] = (
        constants.DEFAULT_SESSION_VALIDATION_INTERVAL
    )
    DEFAULT_IGNORED: ClassVar[List[str]] = constants.DEFAULT_IGNORED

    # Cache
    ACTIVE_SESSIONS_CACHE_NAME: str = Field(
        default=constants.ACTIVE_SESSION_CACHE_NAME, description="Tên cache session"
    )
    AUTHORIZATION_CACHING_ENABLED: bool = Field(
        default=False, description="Cache AuthorizationInfo theo principal"
    )
    AUTHORIZATION_CACHE_NAME: str = Field(
        default=constants.DEFAULT_AUTHORIZATION_CACHE_NAME,
        description="Tên cache authorization",
    )
    AUTHENTICATION_CACHING_ENABLED: bool = Field(
        default=False, description="Cache AuthenticationInfo"
    )
    AUTHENTICATION_CACHE_NAME: str = Field(
        default=constants.DEFAULT_AUTHENTICATION_CACHE_NAME,
        description="Tên cache authentication",
    )
    CACHING_ENABLED: bool = Field(
        default=False, description="Bật/tắt cache authentication/authorization"
    )

    # Captcha
    CAPTCHA_ENABLED: bool = Field(default=False, description="Bật/tắt captcha")
    CAPTCHA_PARAM_NAME: str = Field(
        default=constants.DEFAULT_CAPTCHA_PARAM,
        description="Tên tham số request chứa captcha",
    )
    CAPTCHA_TIMEOUT: int = Field(
        default=constants.DEFAULT_CAPTCHA_TIMEOUT,
        description="Thời gian hiệu lực của captcha (ms)",
    )
    CAPTCHA_CACHE_NAME: str = Field(
        default=constants.DEFAULT_CAPTCHA_CACHE_NAME, description="Tên cache captcha"
    )

    # Credentials retry
    CREDENTIALS_RETRY_TIMES_LIMIT: int = Field(
        default=constants.CREDENTIALS_RETRY_TIMES_LIMIT,
        description="Số lần thử lại credentials tối đa",
    )
    CREDENTIALS_RETRY_CACHE_NAME: str = Field(
        default=constants.CREDENTIALS_RETRY_CACHE_NAME,
        description="Tên cache đếm số lần thử lại",
    )

    # Authorization
    DEFAULT_ROLE_PERMISSIONS: Dict[str, str] = Field(
        default_factory=dict, description="Quyền mặc định theo role"
    )

    ENABLED: bool = Field(default=False, description="Bật/tắt Shiro Biz")

    # URLs
    FAILURE_URL: Optional[str] = Field(
        default=None, description="Đường dẫn khi xác thực thất bại"
    )
    FILTER_CHAIN_DEFINITION_MAP: Dict[str, str] = Field(
        default_factory=default_filter_chain_definitions,
        description="URL pattern -> tên filter chain",
    )
    LOGIN_URL: str = Field(
        default=constants.DEFAULT_LOGIN_URL, description="Đường dẫn đăng nhập"
    )
    POST_ONLY_LOGOUT: bool = Field(
        default=False, description="Chỉ cho phép logout bằng POST"
    )
    REDIRECT_URL: str = Field(
        default=constants.DEFAULT_REDIRECT_URL, description="Đường dẫn sau khi logout"
    )

    # Login retry
    RETRY_TIMES_KEY_ATTRIBUTE: str = Field(
        default=constants.DEFAULT_RETRY_TIMES_KEY_ATTRIBUTE_NAME,
        description="Tên attribute lưu số lần thử lại",
    )
    RETRY_TIMES_WHEN_ACCESS_DENIED: int = Field(
        default=3, description="Số lần đăng nhập lại tối đa"
    )

    # Session
    SESSION_CACHING_ENABLED: bool = Field(default=False, description="Cache session")
    SESSION_CREATION_ENABLED: bool = Field(
        default=True, description="Cho phép Subject tạo session"
    )
    SESSION_DEQUE_CACHE_NAME: str = Field(
        default=constants.DEFAULT_SESSION_DEQUE_CACHE_NAME,
        description="Tên cache của session control filter",
    )
    KICKOUT_FIRST: bool = Field(default=False, description="Kick session đăng nhập đầu")
    SESSION_MAXIMUM_KICKOUT: int = Field(
        default=1, description="Số session tối đa cho cùng một tài khoản"
    )
    SESSION_STORAGE_ENABLED: bool = Field(
        default=True, description="Cho phép lưu trạng thái Subject vào session"
    )
    SESSION_STATELESS: bool = Field(default=False, description="Session stateless")
    SESSION_TIMEOUT: int = Field(
        default=constants.DEFAULT_GLOBAL_SESSION_TIMEOUT,
        description="Thời gian hết hạn session (ms)",
    )
    SESSION_VALIDATION_INTERVAL: int = Field(
        default=constants.DEFAULT_SESSION_VALIDATION_INTERVAL,
        description="Chu kỳ kiểm tra session (ms)",
    )
    SESSION_VALIDATION_SCHEDULER_ENABLED: bool = Field(
        default=True, description="Bật bộ dọn session hết hạn"
    )

    SUCCESS_URL: str = Field(
        default=constants.DEFAULT_SUCCESS_URL,
        description="Đường dẫn sau khi đăng nhập thành công",
    )
    # None: trả về 401 thay vì redirect
    UNAUTHORIZED_URL: Optional[str] = Field(
        default=None, description="Đường dẫn khi bị từ chối truy cập"
    )
    UNIQUE_SESSION: bool = Field(
        default=False, description="Mỗi tài khoản chỉ giữ một session"
    )
    USE_NATIVE_SESSION_MANAGER: bool = Field(
        default=False, description="Dùng native session manager"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="SHIRO_",
        validate_assignment=True,
        extra="ignore",
    )

    def model_post_init(self, __context: Any) -> None:
        # Coupling at binding time only; assignments are handled in __setattr__
        super().__setattr__(
            "CACHING_ENABLED",
            couple_caching_flags(
                self.CACHING_ENABLED,
                *(getattr(self, flag) for flag in CACHING_SUB_FLAGS),
            ),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in CACHING_SUB_FLAGS:
            super().__setattr__(
                "CACHING_ENABLED",
                couple_caching_flags(self.CACHING_ENABLED, getattr(self, name)),
            )

    def is_authorization_caching_enabled(self) -> bool:
        """Authorization caching is on only when the master flag is on too."""
        return self.CACHING_ENABLED and self.AUTHORIZATION_CACHING_ENABLED

    def is_authentication_caching_enabled(self) -> bool:
        """
        Authentication caching is on only when the master flag is on too.

        Only enable it when cached AuthenticationInfo cannot outlive a
        credentials change.
        """
        return self.AUTHENTICATION_CACHING_ENABLED and self.CACHING_ENABLED

    def is_session_caching_enabled(self) -> bool:
        return self.CACHING_ENABLED and self.SESSION_CACHING_ENABLED

    def get_session_config(self) -> Dict[str, Any]:
        """
        Lấy cấu hình session.

        Returns:
            Dict cấu hình session
        """
        return {
            "timeout": self.SESSION_TIMEOUT,
            "validation_interval": self.SESSION_VALIDATION_INTERVAL,
            "validation_scheduler_enabled": self.SESSION_VALIDATION_SCHEDULER_ENABLED,
            "creation_enabled": self.SESSION_CREATION_ENABLED,
            "storage_enabled": self.SESSION_STORAGE_ENABLED,
            "stateless": self.SESSION_STATELESS,
            "caching_enabled": self.is_session_caching_enabled(),
            "unique": self.UNIQUE_SESSION,
            "kickout_first": self.KICKOUT_FIRST,
            "maximum_kickout": self.SESSION_MAXIMUM_KICKOUT,
            "native_manager": self.USE_NATIVE_SESSION_MANAGER,
        }

    def get_cache_names(self) -> Dict[str, str]:
        """
        Lấy tên các cache đang được sử dụng.

        Cache authorization/authentication/session chỉ xuất hiện khi cache
        tương ứng đang bật.

        Returns:
            Dict loại cache -> tên cache
        """
        names = {
            "credentials_retry": self.CREDENTIALS_RETRY_CACHE_NAME,
            "session_deque": self.SESSION_DEQUE_CACHE_NAME,
        }
        if self.CAPTCHA_ENABLED:
            names["captcha"] = self.CAPTCHA_CACHE_NAME
        if self.is_authorization_caching_enabled():
            names["authorization"] = self.AUTHORIZATION_CACHE_NAME
        if self.is_authentication_caching_enabled():
            names["authentication"] = self.AUTHENTICATION_CACHE_NAME
        if self.is_session_caching_enabled():
            names["active_sessions"] = self.ACTIVE_SESSIONS_CACHE_NAME
        return names

    def get_filter_chain_definitions(self) -> List[Tuple[str, str]]:
        """
        Lấy danh sách filter chain theo thứ tự khai báo.

        Returns:
            List các cặp (URL pattern, tên filter chain)
        """
        return list(self.FILTER_CHAIN_DEFINITION_MAP.items())

    def get_captcha_config(self) -> Dict[str, Any]:
        """
        Lấy cấu hình captcha.

        Returns:
            Dict cấu hình captcha
        """
        return {
            "enabled": self.CAPTCHA_ENABLED,
            "param_name": self.CAPTCHA_PARAM_NAME,
            "timeout": self.CAPTCHA_TIMEOUT,
            "cache_name": self.CAPTCHA_CACHE_NAME,
        }
