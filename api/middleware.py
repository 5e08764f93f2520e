"""
Request logging middleware for the meal planner API.
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status code and duration."""

    async def dispatch(self, request: Request, call_next):
        request_info = f"{request.method} {request.url.path}"
        if request.query_params:
            request_info += f"?{request.query_params}"

        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            f"{request_info} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response
