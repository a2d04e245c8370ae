"""
Export service: paginated product downloads as JSON or CSV.

Each call fetches exactly one page of EXPORT_PAGE_SIZE records from the
store and renders it. Nothing is cached between calls.
"""

from typing import Optional, Union
import structlog

from exceptions import InvalidPageError
from models.base import PaginationParams
from models.export import ExportFormat
from models.product import ProductResponse
from services.product_service import ProductService, get_product_service
from utils.csv_encoder import CsvColumn, encode_csv

logger = structlog.get_logger(__name__)

EXPORT_PAGE_SIZE = 10

PRODUCT_CSV_COLUMNS = (
    CsvColumn("id", "ID"),
    CsvColumn("name", "Name"),
    CsvColumn("price", "Price"),
    CsvColumn("quantity", "Quantity"),
)


class ProductExportService:
    """Renders one page of products in the requested format."""

    def __init__(self, products: Optional[ProductService] = None):
        self.products = products or get_product_service()

    def fetch_page(self, page: int) -> list[ProductResponse]:
        """
        Fetch the records for a 1-indexed page.

        Raises:
            InvalidPageError: If page is below 1
        """
        if page < 1:
            raise InvalidPageError(page)

        params = PaginationParams(page=page, page_size=EXPORT_PAGE_SIZE)
        records = self.products.find_page(limit=params.limit, offset=params.offset)

        logger.info(
            "export_page_fetched",
            page=page,
            offset=params.offset,
            count=len(records)
        )

        return records

    def export_json(self, page: int = 1) -> list[ProductResponse]:
        """Page of products in fetch order, ready for JSON serialization."""
        return self.fetch_page(page)

    def export_csv(self, page: int = 1) -> str:
        """Page of products as a CSV document with an ID,Name,Price,Quantity header."""
        records = self.fetch_page(page)
        return encode_csv(
            PRODUCT_CSV_COLUMNS,
            [record.model_dump() for record in records]
        )

    def export(
        self,
        page: int,
        fmt: ExportFormat
    ) -> Union[list[ProductResponse], str]:
        """Dispatch to the exporter for ``fmt``."""
        if fmt == ExportFormat.CSV:
            return self.export_csv(page)
        return self.export_json(page)


# Singleton instance
_export_service: Optional[ProductExportService] = None


def get_export_service() -> ProductExportService:
    """Get or create ProductExportService instance."""
    global _export_service
    if _export_service is None:
        _export_service = ProductExportService()
    return _export_service
