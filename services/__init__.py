"""
Business logic services.

Each service handles one domain area.
"""

from services.product_service import ProductService, get_product_service
from services.price_update_service import PriceUpdateService, get_price_update_service
from services.export_service import (
    ProductExportService,
    get_export_service,
    EXPORT_PAGE_SIZE,
    PRODUCT_CSV_COLUMNS,
)

__all__ = [
    "ProductService",
    "get_product_service",
    "PriceUpdateService",
    "get_price_update_service",
    "ProductExportService",
    "get_export_service",
    "EXPORT_PAGE_SIZE",
    "PRODUCT_CSV_COLUMNS",
]
