"""
Latency Injection Middleware

Delays delivery of responses by a randomized duration to simulate an
unreliable network. The downstream handler runs first; the finished
response is held back for the drawn delay and then returned unchanged.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Optional, Protocol, Sequence

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelayBand:
    """
    Probability band of a delay profile.

    A roll falling inside [lower, upper) (or (lower, upper) when
    include_lower is False) yields a delay drawn uniformly from
    [0, max_delay) seconds.
    """
    lower: float
    upper: float
    max_delay: float
    include_lower: bool = True

    def matches(self, roll: float) -> bool:
        if self.include_lower:
            return self.lower <= roll < self.upper
        return self.lower < roll < self.upper


# API routes: long stalls a quarter of the time, short ones another quarter
API_DELAY_BANDS = (
    DelayBand(0.0, 0.25, 30.0),
    DelayBand(0.75, 1.0, 5.0, include_lower=False),
)

# Static assets: always delayed, occasionally by more
ASSET_DELAY_BANDS = (
    DelayBand(0.0, 0.33, 5.0),
    DelayBand(0.33, 1.0, 2.0),
)


class DelayStrategy(Protocol):
    """Source of injected delays, in seconds"""

    def next_delay(self) -> float:
        ...


class RandomDelay:
    """Delay drawn from the first band matching a uniform roll"""

    def __init__(self, bands: Sequence[DelayBand], rng: Optional[random.Random] = None):
        self.bands = tuple(bands)
        self.rng = rng or random.Random()

    def next_delay(self) -> float:
        roll = self.rng.random()
        for band in self.bands:
            if band.matches(roll):
                return self.rng.random() * band.max_delay
        return 0.0


class FixedDelay:
    """Always the same delay"""

    def __init__(self, seconds: float):
        self.seconds = seconds

    def next_delay(self) -> float:
        return self.seconds


NO_DELAY = FixedDelay(0.0)


def api_delay(rng: Optional[random.Random] = None) -> RandomDelay:
    return RandomDelay(API_DELAY_BANDS, rng)


def asset_delay(rng: Optional[random.Random] = None) -> RandomDelay:
    return RandomDelay(ASSET_DELAY_BANDS, rng)


class LatencyInjectionMiddleware(BaseHTTPMiddleware):
    """
    Middleware holding back responses on selected route groups.

    routes maps a path prefix (e.g. "/api/") to the strategy used for
    requests under it; the first matching prefix wins. Requests outside
    every prefix pass through untouched.
    """

    def __init__(
        self,
        app,
        routes: Mapping[str, DelayStrategy],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__(app)
        self.routes = dict(routes)
        self.sleep = sleep

    def strategy_for(self, path: str) -> Optional[DelayStrategy]:
        for prefix, strategy in self.routes.items():
            if path.startswith(prefix):
                return strategy
        return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        strategy = self.strategy_for(request.url.path)

        response = await call_next(request)

        if strategy is not None:
            delay = strategy.next_delay()
            if delay > 0:
                logger.debug(f"Delaying {request.method} {request.url.path} by {delay:.3f}s")
                await self.sleep(delay)

        return response
