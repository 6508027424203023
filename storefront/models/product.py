"""Product and category models for the storefront catalog"""

from pydantic import BaseModel, Field


class RawProduct(BaseModel):
    """Product record as it appears in the source dataset"""
    name: str
    description: str
    price: str
    currency: str
    category: str
    available: bool
    min_amount: int = Field(alias="minAmount")
    max_amount: int = Field(alias="maxAmount")
    image: str

    class Config:
        populate_by_name = True
        frozen = True


class Category(BaseModel):
    """Product category with an id assigned at normalization time"""
    id: int = Field(ge=1)
    name: str

    class Config:
        frozen = True


class Product(BaseModel):
    """Normalized product referencing its category by id"""
    id: int = Field(ge=1)
    category_id: int = Field(alias="categoryId", ge=1)
    name: str
    description: str
    price: str
    currency: str
    available: bool
    min_amount: int = Field(alias="minAmount")
    max_amount: int = Field(alias="maxAmount")
    image: str

    class Config:
        populate_by_name = True
        frozen = True


class CategoryListResponse(BaseModel):
    """Response listing every category"""
    data: list[Category]
