"""Request logging middleware.

This middleware logs the method, path, status code and duration of every
request, and logs unhandled exceptions before re-raising them.
"""

import time
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that writes one log line per request."""

    async def dispatch(self, request: Request, call_next):
        """Process the request and log its outcome.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware or endpoint in the chain

        Returns:
            HTTP response
        """
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"{request.method} {request.url.path} failed after {process_time:.4f}s: "
                f"{type(e).__name__}: {str(e)}"
            )
            raise

        process_time = time.time() - start_time
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{process_time:.4f}s from {self._get_client_ip(request)}"
        )
        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract the client IP, preferring proxy headers."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
