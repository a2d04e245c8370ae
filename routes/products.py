"""
Product CRUD routes.

Thin pass-through to ProductService. Errors are rendered with the
standard error envelope.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional
import structlog

from models.product import (
    ProductCreate,
    ProductReplace,
    ProductUpdate,
    ProductResponse,
    CountResponse
)
from services.product_service import get_product_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


# ===================
# EXCEPTION HANDLER
# ===================

def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    # Unexpected error
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


# ===================
# ROUTES
# ===================

@router.post("", response_model=ProductResponse)
async def create_product(data: ProductCreate):
    """Create a new product."""
    try:
        service = get_product_service()
        return service.create(data)

    except Exception as e:
        return handle_error(e)


@router.get("/count", response_model=CountResponse)
async def count_products(
    name: Optional[str] = Query(None, description="Filter by name substring")
):
    """Get product count."""
    try:
        service = get_product_service()
        return CountResponse(count=service.count(name=name))

    except Exception as e:
        return handle_error(e)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    limit: int = Query(100, ge=1, le=1000, description="Maximum records"),
    offset: int = Query(0, ge=0, description="Records to skip"),
    name: Optional[str] = Query(None, description="Filter by name substring")
):
    """List products ordered by id."""
    try:
        service = get_product_service()
        return service.get_all(limit=limit, offset=offset, name=name)

    except Exception as e:
        return handle_error(e)


@router.patch("", response_model=CountResponse)
async def update_products(
    data: ProductUpdate,
    name: Optional[str] = Query(None, description="Filter by name substring")
):
    """
    Patch every product matching the filter.

    Returns the number of records updated.
    """
    try:
        service = get_product_service()
        return CountResponse(count=service.update_all(data, name=name))

    except Exception as e:
        return handle_error(e)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int):
    """
    Get a single product by id.

    Raises:
        404: Product not found
    """
    try:
        service = get_product_service()
        return service.get_by_id(product_id)

    except Exception as e:
        return handle_error(e)


@router.patch("/{product_id}", status_code=204)
async def update_product(product_id: int, data: ProductUpdate):
    """
    Update an existing product.

    Only provided fields are updated.

    Raises:
        404: Product not found
    """
    try:
        service = get_product_service()
        service.update(product_id, data)
        return None

    except Exception as e:
        return handle_error(e)


@router.put("/{product_id}", status_code=204)
async def replace_product(product_id: int, data: ProductReplace):
    """
    Replace an existing product.

    Raises:
        404: Product not found
    """
    try:
        service = get_product_service()
        service.replace(product_id, data)
        return None

    except Exception as e:
        return handle_error(e)


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: int):
    """
    Delete a product.

    Raises:
        404: Product not found
    """
    try:
        service = get_product_service()
        service.delete(product_id)
        return None

    except Exception as e:
        return handle_error(e)
