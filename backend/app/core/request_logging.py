"""
Request logging middleware

Logs method, URL, status code and duration of every request once the
response is ready.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs `METHOD /path?query -> status (Nms)` for each request"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000)

        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        logger.info(f"{request.method} {url} -> {response.status_code} ({duration_ms}ms)")
        return response
