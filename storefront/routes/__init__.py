# API Routes

from .catalog import router as catalog_router, get_catalog
from .orders import router as orders_router

__all__ = ["catalog_router", "orders_router", "get_catalog"]
