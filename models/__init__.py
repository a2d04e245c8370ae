"""
Pydantic models for validation and serialization.
"""

from models.base import (
    BaseSchema,
    PaginationParams
)
from models.product import (
    ProductCreate,
    ProductReplace,
    ProductUpdate,
    ProductResponse,
    CountResponse
)
from models.price_update import (
    PriceUpdate,
    PriceUpdateResult,
    PriceUpdateResponse
)
from models.export import ExportFormat

__all__ = [
    # Base
    "BaseSchema",
    "PaginationParams",

    # Product
    "ProductCreate",
    "ProductReplace",
    "ProductUpdate",
    "ProductResponse",
    "CountResponse",

    # Price updates
    "PriceUpdate",
    "PriceUpdateResult",
    "PriceUpdateResponse",

    # Export
    "ExportFormat",
]
