"""
Request Timeout Middleware

Cancels requests whose response has not started within a fixed budget
and answers them with 504 Gateway Timeout. Injected latency counts
against the budget.
"""

import asyncio
import logging

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """
    Plain ASGI middleware enforcing a per-request timeout.

    On timeout the downstream app is cancelled. A response that has
    already started cannot be replaced, so the timeout is re-raised
    and the client sees a dropped connection with a partial body.
    """

    def __init__(self, app: ASGIApp, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), self.timeout)
        except asyncio.TimeoutError:
            if response_started:
                logger.warning(
                    f"Request timed out after {self.timeout}s with the response already started, "
                    f"dropping connection: {scope.get('method')} {scope.get('path')}"
                )
                raise
            logger.warning(
                f"Request timed out after {self.timeout}s: "
                f"{scope.get('method')} {scope.get('path')}"
            )
            response = JSONResponse({"detail": "Gateway Timeout"}, status_code=504)
            await response(scope, receive, send)
