import logging
from typing import Optional

from response_examples.models.product import Product
from response_examples.schemas.product import ProductCreate, ProductUpdate
from response_examples.store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Listing and reading products
    - Creating new products
    - Replacing the mutable fields of a product
    - Deleting products

    Request validation is the caller's job; see
    ``response_examples.services.validation``.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
        return self.store.all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up

        Returns:
            Product instance or None if not found
        """
        return self.store.find(product_id)

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product with its assigned id
        """
        product = self.store.add(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock_quantity=product_data.stock_quantity,
            created_at=self.store.clock(),
        )
        logger.info("Created product with ID %s", product.id)
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """
        Replace the mutable fields of an existing product.

        The id and creation time are kept; ``updated_at`` is stamped.

        Args:
            product_id: ID of product to update
            product_data: New field values

        Returns:
            Updated product or None if not found
        """
        product = self.store.replace(
            product_id,
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock_quantity=product_data.stock_quantity,
            updated_at=self.store.clock(),
        )
        if product:
            logger.info("Updated product with ID %s", product_id)
        return product

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Args:
            product_id: ID of product to delete

        Returns:
            True if deleted, False if not found
        """
        deleted = self.store.remove(product_id)
        if deleted:
            logger.info("Deleted product with ID %s", product_id)
        return deleted
