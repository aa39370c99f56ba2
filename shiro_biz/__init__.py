"""
shiro-biz - Cấu hình bảo mật kiểu Shiro và xác thực captcha dựa trên cache.

Package này bao gồm:
- Config: ShiroBizProperties, KaptchaConfig (pydantic-settings)
- Cache: Protocol cache và các backend (Memory, Redis)
- Security: CaptchaCacheResolver và dependency cho FastAPI
"""

__version__ = "0.1.0"
