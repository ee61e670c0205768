import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger("portal.middleware")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, latency and status for every HTTP request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.exception("%s %s - %.2fms - unhandled error", request.method, request.url.path, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s - %.2fms - %d",
            request.method,
            request.url.path,
            elapsed_ms,
            response.status_code,
        )
        return response
