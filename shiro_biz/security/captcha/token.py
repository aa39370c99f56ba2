from typing import Optional

from pydantic import BaseModel, Field


class CaptchaAuthenticationToken(BaseModel):
    """
    Thông tin đăng nhập kèm captcha.

    Attributes:
        username: Tên đăng nhập
        password: Mật khẩu
        captcha: Captcha người dùng nhập
        remember_me: Ghi nhớ đăng nhập
        host: Địa chỉ client gửi request
    """

    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    captcha: str = Field(default="", repr=False)
    remember_me: bool = False
    host: Optional[str] = None
