"""
Bulk price update and paginated download routes.

Paths are mounted at the application root:
    POST /updatePrices
    GET  /downloadProductsJSON?page=N
    GET  /downloadProductsCSV?page=N
"""

from fastapi import APIRouter, Query, Body
from fastapi.responses import JSONResponse, Response
import structlog

from models.price_update import PriceUpdate, PriceUpdateResponse
from models.product import ProductResponse
from services.price_update_service import get_price_update_service
from services.export_service import get_export_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


# ===================
# EXCEPTION HANDLER
# ===================

def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(status_code=e.status_code, content=e.to_dict())
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
        },
    )


# ===================
# ROUTES
# ===================


@router.post("/updatePrices", response_model=PriceUpdateResponse)
async def update_prices(
    updates: list[PriceUpdate] = Body(..., description="Array of price updates"),
):
    """
    Set new prices for a batch of products.

    Unknown ids are ignored. Always 200 on completion; the message reports
    how many products were actually updated.
    """
    try:
        result = get_price_update_service().apply(updates)
        return PriceUpdateResponse(
            message=result.message,
            updated_count=result.updated_count,
        )

    except Exception as e:
        return handle_error(e)


@router.get("/downloadProductsJSON", response_model=list[ProductResponse])
async def download_products_json(
    page: int = Query(1, ge=1, description="Page number (10 products per page)"),
):
    """JSON array of the products on one page."""
    try:
        return get_export_service().export_json(page)

    except Exception as e:
        return handle_error(e)


@router.get(
    "/downloadProductsCSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}, "description": "CSV file of products"}},
)
async def download_products_csv(
    page: int = Query(1, ge=1, description="Page number (10 products per page)"),
):
    """CSV document of the products on one page."""
    try:
        content = get_export_service().export_csv(page)
        return Response(
            content=content,
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="products_page_{page}.csv"'
            },
        )

    except Exception as e:
        return handle_error(e)
