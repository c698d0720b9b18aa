"""Request logging middleware and logging setup."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("usersapi.requests")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log every request on the way in and its status on the way out."""

    async def dispatch(self, request, call_next):
        method = request.method
        path = request.url.path
        logger.info("%s %s", method, path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            # the error handlers answer with a 500 after this re-raise
            logger.exception("%s %s -> 500 (%.1fms)", method, path, elapsed)
            raise
        elapsed = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1fms)", method, path, response.status_code, elapsed)
        return response
