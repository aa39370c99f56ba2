from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shiro_biz.core.config import get_settings
from shiro_biz.core.exceptions import APIException
from shiro_biz.logging.setup import get_logger

settings = get_settings()
logger = get_logger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """
    Xử lý APIException và trả về response chuẩn kèm error code.
    """
    log_data = {"path": request.url.path, "method": request.method, "code": exc.code}

    if settings.DEBUG and settings.APP_ENV.lower() != "production":
        log_data["query_params"] = dict(request.query_params)

    logger.warning(f"HTTP {exc.status_code} Error: {exc.detail}", extra=log_data)

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(),
        headers=exc.headers or {},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Đăng ký exception handler cho ứng dụng.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(APIException, api_exception_handler)
