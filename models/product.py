"""
Product schemas for validation and serialization.
"""

from pydantic import ConfigDict, Field
from typing import Optional

from models.base import BaseSchema


class ProductCreate(BaseSchema):
    """
    Create a new product.
    
    Required: name, price, quantity
    """
    
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Product name (free text)",
        examples=["Samsung", "Acme, Inc. Widget"]
    )
    price: float = Field(
        ...,
        description="Unit price"
    )
    quantity: int = Field(
        ...,
        description="Units in stock"
    )


class ProductReplace(ProductCreate):
    """
    Replace every field of an existing product.
    
    The id is taken from the path and never from the body.
    """


class ProductUpdate(BaseSchema):
    """
    Update existing product.
    
    All fields optional - only provided fields are updated.
    """
    
    name: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Product name"
    )
    price: Optional[float] = Field(
        None,
        description="Unit price"
    )
    quantity: Optional[int] = Field(
        None,
        description="Units in stock"
    )


class ProductResponse(BaseSchema):
    """
    Product response with all fields.
    
    Field order matches the export column order.
    """
    
    # Stored values are exported exactly as persisted
    model_config = ConfigDict(str_strip_whitespace=False)
    
    id: int = Field(..., description="Product id")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Units in stock")


class CountResponse(BaseSchema):
    """Number of records matched or affected."""
    
    count: int
