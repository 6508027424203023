# Middleware

from .latency import (
    API_DELAY_BANDS,
    ASSET_DELAY_BANDS,
    NO_DELAY,
    DelayBand,
    DelayStrategy,
    FixedDelay,
    LatencyInjectionMiddleware,
    RandomDelay,
    api_delay,
    asset_delay,
)
from .request_logging import RequestLoggingMiddleware
from .timeout import RequestTimeoutMiddleware

__all__ = [
    "API_DELAY_BANDS",
    "ASSET_DELAY_BANDS",
    "NO_DELAY",
    "DelayBand",
    "DelayStrategy",
    "FixedDelay",
    "LatencyInjectionMiddleware",
    "RandomDelay",
    "api_delay",
    "asset_delay",
    "RequestLoggingMiddleware",
    "RequestTimeoutMiddleware",
]
