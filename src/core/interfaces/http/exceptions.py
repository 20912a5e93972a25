"""HTTP exception handlers.

提供统一的异常处理机制，将领域异常转换为标准 HTTP 响应。
各模块的异常类通过定义 http_status_code 和 error_code 类属性来自定义响应。
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.domain.exceptions import DomainException, ValidationError
from src.core.interfaces.http.response import ErrorResponse

_HTTP_ERROR_CODES = {
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def _error_response(
    status_code: int,
    body: ErrorResponse,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        headers=headers,
    )


def _format_location(loc: tuple | list) -> str:
    # ("body", "email") -> "email"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def domain_exception_handler(
    _request: Request, exc: DomainException
) -> JSONResponse:
    """Handle domain exceptions.

    通过读取异常类的 http_status_code 和 error_code 类属性来确定响应。
    """
    status_code = getattr(exc, "http_status_code", 400)
    error_code = getattr(exc, "error_code", "DOMAIN_ERROR")
    fields = exc.fields if isinstance(exc, ValidationError) else None

    return _error_response(
        status_code,
        ErrorResponse.create(code=error_code, message=exc.message, fields=fields),
    )


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request body/path validation failures per field with 400."""
    fields = [
        {"field": _format_location(error.get("loc", ())), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse.create(
            code="VALIDATION_ERROR",
            message="Validation failed",
            fields=fields,
        ),
    )


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (401/403/404 routing) in the error envelope."""
    return _error_response(
        exc.status_code,
        ErrorResponse.create(
            code=_HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            message=str(exc.detail),
        ),
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions.

    只有本地环境才会在响应中附带异常详情。
    """
    logger.exception(f"Unhandled exception: {exc}")
    details = None
    if settings.ENVIRONMENT == "local":
        details = {"error_type": type(exc).__name__, "error_detail": str(exc)}
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse.create(
            code="INTERNAL_ERROR",
            message="An internal error occurred",
            details=details,
        ),
    )
