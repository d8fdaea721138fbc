"""Product store initialization."""

import json
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter

from src.catalog.entities.product import InMemoryProductRepository, Product
from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.context import get_config

_products_adapter = TypeAdapter(list[Product])


def load_products(path: Path) -> dict[int, Product]:
    """Load products from a JSON array file into a mapping keyed by id.

    Raises:
        ValueError: If the file is not valid product JSON or repeats an id.
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    products = _products_adapter.validate_python(raw)

    db: dict[int, Product] = {}
    for product in products:
        if product.id in db:
            raise ValueError(f"Duplicate product id {product.id} in {path}")
        db[product.id] = product
    return db


def init_store(catalog: CatalogConfig | None = None) -> InMemoryProductRepository:
    """Build the in-memory product repository from the configured seed file."""
    seed_file = (catalog or get_config().catalog).seed_file
    if seed_file is None:
        logger.info("No product seed file configured; starting with an empty store")
        return InMemoryProductRepository({})

    path = Path(seed_file)
    if not path.is_file():
        logger.error("Product seed file {} does not exist", path)
        raise FileNotFoundError(f"Product seed file not found: {path}")

    db = load_products(path)
    logger.info("Loaded {} products from {}", len(db), seed_file)
    return InMemoryProductRepository(db)
