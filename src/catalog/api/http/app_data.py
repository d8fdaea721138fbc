from dataclasses import dataclass

from src.catalog.entities.product import ProductRepository


@dataclass
class ApplicationDependencies:
    product_repository: ProductRepository
