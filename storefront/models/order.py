"""Order models for the storefront"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class OrderLine(BaseModel):
    """Single line of an order request"""
    product_id: int = Field(alias="productId")
    qty: int = Field(ge=1)
    note: Optional[str] = None

    class Config:
        extra = "allow"

    @field_validator("product_id", "qty", mode="before")
    @classmethod
    def must_be_json_number(cls, value: Any) -> Any:
        # Integral floats such as 2.0 pass; strings and booleans do not
        if isinstance(value, (bool, str)):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        return value

    @field_validator("note", mode="before")
    @classmethod
    def note_must_be_string(cls, value: Any) -> Any:
        # Optional means "may be omitted", not "may be null"
        if value is None:
            raise ValueError("note must be a string when present")
        return value


class OrderRequest(BaseModel):
    """Order submission payload"""
    data: list[OrderLine]


class OrderResponse(BaseModel):
    """Echo of a validated order"""
    data: list[dict[str, Any]]
