"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.products import router as products_router
from routes.bulk import router as bulk_router

__all__ = [
    "products_router",
    "bulk_router",
]
