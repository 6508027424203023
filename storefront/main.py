"""
Storefront Application

Product catalog and order API with simulated network instability:
responses on /api and /public are randomly delayed, and a global
request timeout turns long delays into 504 errors.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .database.catalog import Catalog, load_catalog
from .middleware import (
    NO_DELAY,
    DelayStrategy,
    LatencyInjectionMiddleware,
    RequestLoggingMiddleware,
    RequestTimeoutMiddleware,
    api_delay,
    asset_delay,
)
from .routes import catalog_router, orders_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.resolved_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
    api_delay_strategy: Optional[DelayStrategy] = None,
    asset_delay_strategy: Optional[DelayStrategy] = None,
) -> FastAPI:
    """
    Build the storefront application.

    The catalog is loaded and normalized here, once, before any request
    is served. Delay strategies default to the random API and asset
    profiles, or to no delay when latency injection is disabled.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if catalog is None:
        catalog = load_catalog(settings.catalog_path)

    if not settings.latency_enabled:
        api_delay_strategy = api_delay_strategy or NO_DELAY
        asset_delay_strategy = asset_delay_strategy or NO_DELAY

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up on port {settings.port}...")
        logger.info(f"Latency injection: {'enabled' if settings.latency_enabled else 'disabled'}")
        logger.info(f"Request timeout: {settings.request_timeout}s")
        yield
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Product catalog and order API with simulated network instability",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.catalog = catalog
    app.state.settings = settings

    # Middleware added last runs first: CORS -> logging -> timeout -> latency
    app.add_middleware(
        LatencyInjectionMiddleware,
        routes={
            "/api/": api_delay_strategy or api_delay(),
            "/public/": asset_delay_strategy or asset_delay(),
        },
    )
    app.add_middleware(RequestTimeoutMiddleware, timeout=settings.request_timeout)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if os.path.isdir(settings.public_dir):
        app.mount("/public", StaticFiles(directory=settings.public_dir), name="public")
    else:
        logger.warning(f"Public directory {settings.public_dir} not found - /public disabled")

    app.include_router(catalog_router)
    app.include_router(orders_router)

    @app.get("/")
    async def home():
        """Greeting"""
        return {"title": "Hello Storefront!"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
