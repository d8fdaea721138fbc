"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_product_repository
from src.catalog.entities.product import ProductQuery, ProductRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    return {"status": "healthy", "service": "catalog"}


@router.get("/ready", response_model=None)
def readiness(
    repository: ProductRepository = Depends(get_product_repository),
) -> dict[str, Any] | JSONResponse:
    """Readiness check - returns 503 when the product store cannot be searched."""
    try:
        products = repository.search_products(ProductQuery())
    except Exception as e:
        logger.warning("Readiness check failed: {}", e)
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "checks": {"repository": {"status": "unhealthy", "error": str(e)}},
            },
        )

    return {
        "status": "ready",
        "checks": {"repository": {"status": "healthy", "products": len(products)}},
    }
