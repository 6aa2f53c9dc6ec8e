"""API routes module."""

from catalog.api.routes.health import router as health_router
from catalog.api.routes.products import router as products_router

__all__ = ["health_router", "products_router"]
