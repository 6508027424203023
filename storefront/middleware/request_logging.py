"""Request logging middleware"""

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request on arrival and on completion with its status and duration"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info(f"<-- {request.method} {request.url.path}")
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"--> {request.method} {request.url.path} {response.status_code} {elapsed_ms:.0f}ms"
        )
        return response
