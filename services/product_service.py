"""
Product service: the record store for product rows.

Every method is a direct round trip to the Supabase products table.
Store failures are logged and re-raised as DatabaseError.
"""

from typing import Optional
import structlog

from config import get_supabase_client, settings
from models.product import (
    ProductCreate,
    ProductReplace,
    ProductUpdate,
    ProductResponse
)
from exceptions import (
    ProductNotFoundError,
    DatabaseError
)

logger = structlog.get_logger(__name__)


class ProductService:
    """
    Product persistence.

    Handles CRUD operations plus the point lookup, single-price write and
    bounded page scan used by bulk updates and exports.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = settings.products_table

    # ===================
    # READ OPERATIONS
    # ===================

    def get_all(
        self,
        limit: int = 100,
        offset: int = 0,
        name: Optional[str] = None
    ) -> list[ProductResponse]:
        """
        Get products ordered by id with optional name filter.

        Args:
            limit: Maximum rows to return
            offset: Rows to skip
            name: Case-insensitive substring match on name

        Returns:
            List of ProductResponse
        """
        logger.info(
            "getting_products",
            limit=limit,
            offset=offset,
            name=name
        )

        try:
            query = self.db.table(self.table).select("*")

            if name:
                query = query.ilike("name", f"%{name}%")

            query = query.order("id").range(offset, offset + limit - 1)

            result = query.execute()

            products = [ProductResponse(**row) for row in result.data]

            logger.info("products_retrieved", count=len(products))

            return products

        except Exception as e:
            logger.error("get_products_failed", error=str(e))
            raise DatabaseError("select", str(e))

    def find_page(self, limit: int, offset: int) -> list[ProductResponse]:
        """
        Fetch one bounded page in id order.

        Never reads beyond ``offset + limit``; an offset past the last row
        yields an empty list.
        """
        logger.debug("fetching_product_page", limit=limit, offset=offset)

        try:
            result = (
                self.db.table(self.table)
                .select("id, name, price, quantity")
                .order("id")
                .range(offset, offset + limit - 1)
                .execute()
            )

            return [ProductResponse(**row) for row in result.data]

        except Exception as e:
            logger.error(
                "fetch_product_page_failed",
                limit=limit,
                offset=offset,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def find_by_id(self, product_id: int) -> Optional[ProductResponse]:
        """
        Look up a product by id.

        Args:
            product_id: Product id

        Returns:
            ProductResponse or None if not found
        """
        logger.debug("finding_product", product_id=product_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("id", product_id)
                .limit(1)
                .execute()
            )

            if not result.data:
                return None

            return ProductResponse(**result.data[0])

        except Exception as e:
            logger.error(
                "find_product_failed",
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

    def get_by_id(self, product_id: int) -> ProductResponse:
        """
        Get a single product by id.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        product = self.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def count(self, name: Optional[str] = None) -> int:
        """Count products, optionally filtered by name substring."""
        try:
            query = self.db.table(self.table).select("id", count="exact")
            if name:
                query = query.ilike("name", f"%{name}%")
            result = query.execute()
            return result.count or 0
        except Exception as e:
            logger.error("count_products_failed", error=str(e))
            raise DatabaseError("count", str(e))

    # ===================
    # WRITE OPERATIONS
    # ===================

    def create(self, data: ProductCreate) -> ProductResponse:
        """
        Create a new product.

        Args:
            data: Product creation data

        Returns:
            Created ProductResponse with its store-assigned id
        """
        logger.info("creating_product", name=data.name)

        try:
            result = (
                self.db.table(self.table)
                .insert(data.model_dump())
                .execute()
            )

            product = ProductResponse(**result.data[0])

            logger.info(
                "product_created",
                product_id=product.id,
                name=product.name
            )

            return product

        except Exception as e:
            logger.error(
                "create_product_failed",
                name=data.name,
                error=str(e)
            )
            raise DatabaseError("insert", str(e))

    def create_many(self, products: list[ProductCreate]) -> list[ProductResponse]:
        """Insert several products in one request."""
        if not products:
            return []

        logger.info("creating_products", count=len(products))

        try:
            result = (
                self.db.table(self.table)
                .insert([p.model_dump() for p in products])
                .execute()
            )

            return [ProductResponse(**row) for row in result.data]

        except Exception as e:
            logger.error(
                "create_products_failed",
                count=len(products),
                error=str(e)
            )
            raise DatabaseError("insert", str(e))

    def update(self, product_id: int, data: ProductUpdate) -> ProductResponse:
        """
        Patch an existing product.

        Args:
            product_id: Product id
            data: Fields to update

        Returns:
            Updated ProductResponse

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        logger.info("updating_product", product_id=product_id)

        existing = self.get_by_id(product_id)

        update_data = data.model_dump(exclude_none=True)
        if not update_data:
            return existing

        return self._write(product_id, update_data)

    def replace(self, product_id: int, data: ProductReplace) -> ProductResponse:
        """
        Replace every field of an existing product.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        logger.info("replacing_product", product_id=product_id)

        self.get_by_id(product_id)

        return self._write(product_id, data.model_dump())

    def update_price(
        self,
        product_id: int,
        new_price: float
    ) -> Optional[ProductResponse]:
        """
        Persist a new price for one product.

        Returns:
            Updated ProductResponse, or None if no row has this id

        Raises:
            DatabaseError: If the write fails
        """
        try:
            result = (
                self.db.table(self.table)
                .update({"price": new_price})
                .eq("id", product_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "update_price_failed",
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("update", str(e), {"product_id": product_id})

        if not result.data:
            return None

        return ProductResponse(**result.data[0])

    def update_all(
        self,
        data: ProductUpdate,
        name: Optional[str] = None
    ) -> int:
        """
        Patch every product matching the name filter (all products if None).

        Returns:
            Number of rows updated
        """
        update_data = data.model_dump(exclude_none=True)

        logger.info(
            "updating_products",
            name=name,
            fields=list(update_data.keys())
        )

        if not update_data:
            return 0

        try:
            query = self.db.table(self.table).update(update_data)
            if name:
                query = query.ilike("name", f"%{name}%")
            else:
                # PostgREST refuses unfiltered updates
                query = query.gt("id", 0)

            result = query.execute()

            logger.info("products_updated", count=len(result.data))

            return len(result.data)

        except Exception as e:
            logger.error("update_products_failed", name=name, error=str(e))
            raise DatabaseError("update", str(e))

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        logger.info("deleting_product", product_id=product_id)

        self.get_by_id(product_id)

        try:
            self.db.table(self.table).delete().eq("id", product_id).execute()

            logger.info("product_deleted", product_id=product_id)

        except Exception as e:
            logger.error(
                "delete_product_failed",
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("delete", str(e))

    # ===================
    # HELPERS
    # ===================

    def _write(self, product_id: int, update_data: dict) -> ProductResponse:
        try:
            result = (
                self.db.table(self.table)
                .update(update_data)
                .eq("id", product_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "update_product_failed",
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("update", str(e))

        if not result.data:
            raise ProductNotFoundError(product_id)

        logger.info(
            "product_updated",
            product_id=product_id,
            fields=list(update_data.keys())
        )

        return ProductResponse(**result.data[0])


# Singleton instance for convenience
_product_service: Optional[ProductService] = None

def get_product_service() -> ProductService:
    """Get or create ProductService instance."""
    global _product_service
    if _product_service is None:
        _product_service = ProductService()
    return _product_service
