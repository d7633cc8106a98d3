from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import ConfigDict, Field, PlainSerializer

from response_examples.schemas.base import CamelModel

# Decimal internally, plain JSON number on the wire
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductRequest(CamelModel):
    """
    Common body for creating or updating a product.

    Range and presence checks are done by the product validator so that
    every violated field is reported in one response.
    """
    name: Optional[str] = Field(None, description="Product name (required)")
    description: Optional[str] = Field(None, description="Optional product description")
    price: Price = Field(Decimal("0"), description="Product price, must be >= 0")
    stock_quantity: int = Field(0, description="Available stock, must be >= 0")


class ProductCreate(ProductRequest):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductRequest):
    """Schema for replacing the mutable fields of an existing product."""
    pass


class ProductResponse(CamelModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    description: Optional[str] = None
    price: Price
    stock_quantity: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
