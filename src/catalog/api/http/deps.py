from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.entities.product import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Get the product repository from application dependencies."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.product_repository
