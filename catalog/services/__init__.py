"""Data access services."""

from catalog.services.catalog_client import (
    CatalogClient,
    FetchResult,
    FetchStatus,
    get_catalog_client,
)
from catalog.services.product_repository import ProductRepository

__all__ = [
    "CatalogClient",
    "FetchResult",
    "FetchStatus",
    "get_catalog_client",
    "ProductRepository",
]
