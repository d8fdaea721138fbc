"""Product API router."""

import re
from http import HTTPStatus
from typing import Any

from fastapi import APIRouter, Depends, Query
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_product_repository
from src.catalog.entities.product import Product, ProductQuery, ProductRepository

router = APIRouter(prefix="/products", tags=["products"])

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


def error_response(status: HTTPStatus, message: str) -> JSONResponse:
    """Render the error envelope for ``status``."""
    return JSONResponse(
        status_code=status,
        content={"status": status.phrase, "message": message},
    )


def render_products(products: dict[int, Product]) -> dict[str, Any]:
    """Render the success envelope, keying each product by its id as a string."""
    return {
        "message": "success",
        "data": {str(pid): product.model_dump() for pid, product in products.items()},
    }


def parse_product_id(raw_id: str | None) -> int:
    """Convert the ``id`` query parameter, 0 meaning no filter.

    Raises:
        ValueError: If the parameter is present but not an ASCII decimal integer.
    """
    if not raw_id:
        return 0
    if _DECIMAL_ID.fullmatch(raw_id) is None:
        raise ValueError(f"invalid product id {raw_id!r}")
    return int(raw_id)


@router.get("", response_model=None)
def get_products(
    raw_id: str | None = Query(default=None, alias="id"),
    repository: ProductRepository = Depends(get_product_repository),
) -> JSONResponse:
    """List all products, or the product matching ``id`` when given."""
    try:
        product_id = parse_product_id(raw_id)
    except ValueError:
        logger.info("Rejected non-numeric product id {!r}", raw_id)
        return error_response(HTTPStatus.BAD_REQUEST, "invalid id")

    query = ProductQuery(id=product_id)
    try:
        products = repository.search_products(query)
    except Exception:
        logger.exception("Product search failed for id {}", query.id)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "internal error")

    return JSONResponse(status_code=HTTPStatus.OK, content=render_products(products))
