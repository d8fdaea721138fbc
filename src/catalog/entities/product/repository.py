"""Product repositories."""

from collections.abc import Mapping
from typing import Protocol

from loguru import logger

from src.catalog.entities.product.entity import Product, ProductQuery


class ProductRepositoryError(Exception):
    """Raised when the underlying product store cannot be read."""


class ProductRepository(Protocol):
    """Capability every product store must provide."""

    def search_products(self, query: ProductQuery) -> dict[int, Product]:
        """Return the products matching ``query`` keyed by id.

        A product that does not exist is not an error: the result is simply
        empty. Store failures are raised to the caller unchanged.
        """
        ...


class InMemoryProductRepository:
    """Data-access layer over a mapping of product id to product."""

    def __init__(self, db: Mapping[int, Product]) -> None:
        for key, product in db.items():
            if key != product.id:
                raise ValueError(
                    f"Store key {key} does not match product id {product.id}"
                )
        self._db = dict(db)

    def search_products(self, query: ProductQuery) -> dict[int, Product]:
        if query.is_unfiltered:
            return dict(self._db)

        product = self._db.get(query.id)
        if product is None:
            logger.debug("Product {} not found", query.id)
            return {}
        return {product.id: product}
