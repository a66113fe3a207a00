"""Request logging middleware."""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, client, status and duration of every request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s from %s -> %d in %.1fms (%s)",
            request.method,
            request.url.path,
            request.client.host if request.client else "-",
            response.status_code,
            duration_ms,
            request.headers.get("user-agent", "-"),
        )
        return response
