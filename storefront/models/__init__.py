# Storefront Models

from .product import Category, CategoryListResponse, Product, RawProduct
from .pagination import PaginationMeta, ProductPage
from .order import OrderLine, OrderRequest, OrderResponse

__all__ = [
    "Category",
    "CategoryListResponse",
    "Product",
    "RawProduct",
    "PaginationMeta",
    "ProductPage",
    "OrderLine",
    "OrderRequest",
    "OrderResponse",
]
