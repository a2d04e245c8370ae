"""
Seed products table with sample data.

Skips seeding when the table already holds products.
"""

import sys
from pathlib import Path

# Add project root to path so we can import modules
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import structlog

from models.product import ProductCreate
from services.product_service import get_product_service

logger = structlog.get_logger(__name__)

SAMPLE_PRODUCTS = [
    ProductCreate(name="Samsung", price=10000, quantity=50),
    ProductCreate(name="I phone", price=16000, quantity=30),
    ProductCreate(name="Nokia", price=70000, quantity=75),
    ProductCreate(name="poco", price=120000, quantity=40),
    ProductCreate(name="realme", price=900000, quantity=60),
]


def seed_products() -> list:
    """Insert the sample products if the table is empty."""
    service = get_product_service()

    existing = service.count()
    if existing > 0:
        logger.info("products_already_seeded", count=existing)
        print(f"✓ Products table already has {existing} products")
        return []

    try:
        created = service.create_many(SAMPLE_PRODUCTS)

        logger.info("products_seeded", count=len(created))
        print(f"✓ Successfully seeded {len(created)} products")

        return created

    except Exception as e:
        logger.error("seed_products_failed", error=str(e))
        print(f"✗ Failed to seed products: {e}")
        raise


if __name__ == "__main__":
    print("Seeding products table...")
    seed_products()
    print("\nDone!")
