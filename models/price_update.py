"""
Bulk price update schemas.
"""

from pydantic import ConfigDict, Field

from models.base import BaseSchema


class PriceUpdate(BaseSchema):
    """
    A single (id, newPrice) pair from an update batch.
    
    Accepts the wire name ``newPrice`` as well as ``new_price``.
    """
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: int = Field(..., description="Product id to update")
    new_price: float = Field(
        ...,
        alias="newPrice",
        description="Price to set"
    )


class PriceUpdateResult(BaseSchema):
    """Outcome of one batch: only the number of records actually updated."""
    
    updated_count: int = Field(..., ge=0)
    
    @property
    def message(self) -> str:
        return f"Successfully updated prices for {self.updated_count} products."


class PriceUpdateResponse(BaseSchema):
    """Response body for POST /updatePrices."""
    
    message: str = Field(
        ...,
        examples=["Successfully updated prices for 3 products."]
    )
    updated_count: int
