"""Offset pagination over the product catalog"""

import math
import re
import sys
from typing import Optional, Sequence

from ..models.pagination import PaginationMeta, ProductPage
from ..models.product import Product

PER_PAGE = 10

# Longer integer parts saturate to sys.maxsize
MAX_DIGITS = 18

# Optional sign, integer part, optional fractional part
_NUMBER_RE = re.compile(r"^\s*([+-]?)(\d+)(?:\.\d*)?\s*$")


def paginate(
    products: Sequence[Product],
    page: int,
    category_id: Optional[int] = None,
) -> ProductPage:
    """
    Return one page of products plus pagination metadata.

    A truthy category_id restricts the collection to products in that
    category. The requested page is clamped to [1, total_pages]; when
    nothing matches, total_pages is 0 and so is the current page.

    Args:
        products: Normalized products, in catalog order
        page: Requested 1-based page number
        category_id: Optional category filter

    Returns:
        ProductPage with at most PER_PAGE items
    """
    if category_id:
        products = [p for p in products if p.category_id == category_id]

    total_elements = len(products)
    total_pages = math.ceil(total_elements / PER_PAGE)

    current_page = max(page, 1)
    current_page = min(current_page, total_pages)

    if current_page > 0:
        start = (current_page - 1) * PER_PAGE
        end = min(current_page * PER_PAGE, total_elements)
        data = list(products[start:end])
    else:
        data = []

    return ProductPage(
        data=data,
        meta=PaginationMeta(
            per_page=PER_PAGE,
            total_pages=total_pages,
            current_page=current_page,
            total_elements=total_elements,
        ),
    )


def _parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse a query value as an integer, truncating any fractional part"""
    if raw is None:
        return None
    match = _NUMBER_RE.match(raw)
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    value = sys.maxsize if len(digits) > MAX_DIGITS else int(digits)
    return -value if sign == "-" else value


def parse_page(raw: Optional[str]) -> int:
    """
    Turn the `page` query value into a page number.

    Missing, empty and non-numeric values mean page 1. Fractional values
    are truncated ("2.9" is page 2). Out-of-range numbers are returned
    as-is and left to paginate() to clamp; numbers too long to convert
    saturate to sys.maxsize with their sign.
    """
    page = _parse_int(raw)
    return 1 if page is None else page


def parse_category_id(raw: Optional[str]) -> Optional[int]:
    """Turn the `categoryId` query value into a filter, None meaning unfiltered"""
    category_id = _parse_int(raw)
    return category_id or None
