"""
Request logging middleware. Logs method, path, status, duration and the
feed's cache/fallback markers. Never logs headers, body, or query params.
"""
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        method = request.method
        path = request.scope.get("path", "")
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        status = response.status_code
        cache_status = response.headers.get("X-Intel-Cache", "-")
        fallback = response.headers.get("X-Fallback", "-")

        if status >= 500:
            log = logger.error
        elif status >= 400 or fallback != "-":
            log = logger.warning
        else:
            log = logger.info
        log(
            "request_finished method=%s path=%s status=%s cache=%s fallback=%s duration_ms=%.1f",
            method, path, status, cache_status, fallback, duration_ms,
        )
        return response
