# Catalog storage and pagination

from .catalog import (
    Catalog,
    CatalogLoadError,
    load_catalog,
    load_raw_products,
    normalize_catalog,
    parse_raw_products,
)
from .pagination import PER_PAGE, paginate, parse_category_id, parse_page

__all__ = [
    "Catalog",
    "CatalogLoadError",
    "load_catalog",
    "load_raw_products",
    "normalize_catalog",
    "parse_raw_products",
    "PER_PAGE",
    "paginate",
    "parse_category_id",
    "parse_page",
]
