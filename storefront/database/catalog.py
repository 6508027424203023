"""In-memory product catalog built once from the raw dataset"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from ..models.pagination import ProductPage
from ..models.product import Category, Product, RawProduct
from .pagination import paginate

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when the product dataset cannot be read or parsed"""


def normalize_catalog(
    raw_products: Iterable[RawProduct],
) -> tuple[list[Category], list[Product]]:
    """
    Split flat product records into categories and products.

    Category ids are assigned in first-seen order starting at 1. Each
    product gets its 1-based input position as id and references its
    category by id instead of by name.
    """
    categories: list[Category] = []
    category_ids: dict[str, int] = {}
    products: list[Product] = []

    for index, raw in enumerate(raw_products):
        category_id = category_ids.get(raw.category)
        if category_id is None:
            category_id = len(categories) + 1
            category_ids[raw.category] = category_id
            categories.append(Category(id=category_id, name=raw.category))

        products.append(
            Product(
                id=index + 1,
                category_id=category_id,
                **raw.model_dump(exclude={"category"}),
            )
        )

    return categories, products


@dataclass(frozen=True)
class Catalog:
    """Read-only catalog shared by every request handler"""

    categories: tuple[Category, ...]
    products: tuple[Product, ...]

    @classmethod
    def from_raw(cls, raw_products: Iterable[RawProduct]) -> "Catalog":
        """Build a catalog by normalizing raw product records"""
        categories, products = normalize_catalog(raw_products)
        return cls(categories=tuple(categories), products=tuple(products))

    def paginate(self, page: int, category_id: Optional[int] = None) -> ProductPage:
        """Get one page of products, optionally filtered by category"""
        return paginate(self.products, page, category_id)


def parse_raw_products(records: Any) -> list[RawProduct]:
    """Validate decoded JSON as a list of raw product records"""
    if not isinstance(records, list):
        raise CatalogLoadError("Product dataset must be a JSON array")

    raw_products = []
    for position, record in enumerate(records, start=1):
        try:
            raw_products.append(RawProduct.model_validate(record))
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid product record #{position}: {e}") from e
    return raw_products


def load_raw_products(path: str) -> list[RawProduct]:
    """Read the product dataset from a JSON file"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read product dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Product dataset {path} is not valid JSON: {e}") from e

    return parse_raw_products(records)


def load_catalog(path: str) -> Catalog:
    """Load and normalize the product dataset"""
    catalog = Catalog.from_raw(load_raw_products(path))
    logger.info(
        f"Catalog loaded from {path}: {len(catalog.products)} products "
        f"in {len(catalog.categories)} categories"
    )
    return catalog
