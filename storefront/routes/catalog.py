"""Catalog API routes"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ..database.catalog import Catalog
from ..database.pagination import parse_category_id, parse_page
from ..models.pagination import ProductPage
from ..models.product import CategoryListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Catalog"])


def get_catalog(request: Request) -> Catalog:
    """Catalog built at startup and attached to the application state"""
    return request.app.state.catalog


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(catalog: Catalog = Depends(get_catalog)):
    """List all product categories"""
    logger.debug(f"Categories: {catalog.categories}")
    return CategoryListResponse(data=list(catalog.categories))


@router.get("/products", response_model=ProductPage)
async def list_products(
    page: Optional[str] = Query(None, description="1-based page number"),
    category_id: Optional[str] = Query(None, alias="categoryId", description="Filter by category"),
    catalog: Catalog = Depends(get_catalog),
):
    """
    List products, ten per page.

    Missing or non-numeric page means page 1; out-of-range pages are
    clamped. A missing, zero or non-numeric categoryId means unfiltered.
    """
    return catalog.paginate(parse_page(page), parse_category_id(category_id))
