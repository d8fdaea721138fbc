"""Entity package: Product."""

from .entity import Product, ProductQuery
from .repository import (
    InMemoryProductRepository,
    ProductRepository,
    ProductRepositoryError,
)

__all__ = [
    "InMemoryProductRepository",
    "Product",
    "ProductQuery",
    "ProductRepository",
    "ProductRepositoryError",
]
