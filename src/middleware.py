"""
공통 미들웨어 및 예외 핸들러
"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gateway.errors import InternalError

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Download-Options": "noopen",
    "X-XSS-Protection": "0",
    "Referrer-Policy": "no-referrer",
}


def internal_error_response(legacy_error_status: bool = False) -> JSONResponse:
    error = InternalError()
    return JSONResponse(
        status_code=error.http_status(legacy_error_status),
        content=error.to_envelope(legacy_error_status),
    )


def _log_unhandled(request: Request, exc: Exception):
    logger.error(f"처리되지 않은 예외 ({request.method} {request.url.path}): {exc}", exc_info=exc)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    모든 응답에 보안 헤더 추가

    처리되지 않은 예외도 여기서 InternalError 응답으로 바꿔서,
    바깥 CORS 미들웨어와 보안 헤더가 에러 응답에도 그대로 적용되게 합니다.
    """

    def __init__(self, app, legacy_error_status: bool = False):
        super().__init__(app)
        self.legacy_error_status = legacy_error_status

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            _log_unhandled(request, exc)
            response = internal_error_response(self.legacy_error_status)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


def register_exception_handlers(app, legacy_error_status: bool = False):
    """미들웨어 바깥에서 발생한 예외의 마지막 처리 (InternalError 응답 봉투)"""

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        _log_unhandled(request, exc)
        return internal_error_response(legacy_error_status)
