from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIException(HTTPException):
    """
    Base exception class cho API errors.
    Mở rộng từ HTTPException để thêm error code.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        code: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Khởi tạo exception.

        Args:
            status_code: HTTP status code
            detail: Error detail message
            code: Error code
            headers: HTTP headers
        """
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code

    def to_response(self) -> Dict[str, Any]:
        """Convert to response dict."""
        response = {"detail": self.detail}

        if self.code:
            response["code"] = self.code

        return response


class UnauthorizedException(APIException):
    """401 Unauthorized exception."""

    def __init__(
        self,
        detail: str = "Not authenticated",
        code: Optional[str] = "unauthorized",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            code=code,
            headers=headers,
        )


class AuthenticationException(UnauthorizedException):
    """Authentication exception."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        code: Optional[str] = "authentication_error",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(detail=detail, code=code, headers=headers)


class IncorrectCaptchaException(AuthenticationException):
    """Captcha thiếu hoặc không khớp."""

    def __init__(
        self,
        detail: str = "Incorrect captcha",
        code: Optional[str] = "incorrect_captcha",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(detail=detail, code=code, headers=headers)


class InvalidCaptchaException(AuthenticationException):
    """Captcha đã hết hạn."""

    def __init__(
        self,
        detail: str = "Invalid captcha",
        code: Optional[str] = "invalid_captcha",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(detail=detail, code=code, headers=headers)


# Captcha store exceptions
class CaptchaException(Exception):
    """Base exception for captcha store errors."""

    pass


class CaptchaIncorrectException(CaptchaException):
    """Presented or stored captcha text is missing."""

    pass


class CaptchaTimeoutException(CaptchaException):
    """Stored captcha is older than the configured timeout."""

    pass


class CacheException(Exception):
    """Cache backend could not be built."""

    pass
