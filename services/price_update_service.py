"""
Bulk price update service.

Applies a batch of (id, newPrice) pairs one record at a time:
- unknown ids are skipped and not counted
- each found record is written immediately, there is no batch transaction
- the first store failure aborts the rest of the batch; earlier writes stay
"""

from typing import Optional, Sequence
import structlog

from models.price_update import PriceUpdate, PriceUpdateResult
from services.product_service import ProductService, get_product_service

logger = structlog.get_logger(__name__)


class PriceUpdateService:
    """Sequential, non-atomic price updates over the product store."""

    def __init__(self, products: Optional[ProductService] = None):
        self.products = products or get_product_service()

    def apply(self, updates: Sequence[PriceUpdate]) -> PriceUpdateResult:
        """
        Apply price updates in sequence order.

        Duplicate ids are applied in turn, so the last entry for an id wins.

        Args:
            updates: Ordered batch of price updates

        Returns:
            PriceUpdateResult with the number of records actually updated

        Raises:
            DatabaseError: On the first failed read or write
        """
        logger.info("bulk_price_update_started", batch_size=len(updates))

        updated_count = 0

        for update in updates:
            product = self.products.find_by_id(update.id)

            if product is None:
                logger.debug("price_update_skipped", product_id=update.id)
                continue

            written = self.products.update_price(update.id, update.new_price)
            if written is None:
                # Row vanished between the read and the write
                logger.debug("price_update_skipped", product_id=update.id)
                continue

            updated_count += 1

        logger.info(
            "bulk_price_update_complete",
            batch_size=len(updates),
            updated=updated_count,
            skipped=len(updates) - updated_count
        )

        return PriceUpdateResult(updated_count=updated_count)


# Singleton instance
_price_update_service: Optional[PriceUpdateService] = None


def get_price_update_service() -> PriceUpdateService:
    """Get or create PriceUpdateService instance."""
    global _price_update_service
    if _price_update_service is None:
        _price_update_service = PriceUpdateService()
    return _price_update_service
