"""Pagination models for product listings"""

from pydantic import BaseModel, Field

from .product import Product


class PaginationMeta(BaseModel):
    """Pagination metadata, recomputed per request"""
    per_page: int = Field(alias="perPage")
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    total_elements: int = Field(alias="totalElements")

    class Config:
        populate_by_name = True


class ProductPage(BaseModel):
    """One page of products plus its metadata"""
    data: list[Product]
    meta: PaginationMeta
