"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    DatabaseError,

    # Product-specific
    ProductNotFoundError,

    # Export
    InvalidPageError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "DatabaseError",

    # Product
    "ProductNotFoundError",

    # Export
    "InvalidPageError",
]
