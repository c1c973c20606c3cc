"""
Request logging middleware recording method, path, status and duration.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware logging one line per request.
    Requests slower than the threshold are logged at warning level.
    """

    def __init__(
        self,
        app: ASGIApp,
        slow_request_threshold: float = 1.0,  # seconds
    ):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and time it.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object with an X-Process-Time header
        """
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            processing_time = time.perf_counter() - start_time
            logger.exception(
                f"{request.method} {request.url.path} failed after {processing_time:.3f}s"
            )
            raise

        processing_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{processing_time:.3f}"

        message = f"{request.method} {request.url.path} {response.status_code} {processing_time:.3f}s"
        if processing_time > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}")
        else:
            logger.info(message)

        return response
