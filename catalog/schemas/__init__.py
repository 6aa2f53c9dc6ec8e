"""Pydantic schemas for response validation."""

from catalog.schemas.common import ErrorResponse, HealthResponse
from catalog.schemas.product import ProductDetailResponse, ProductListResponse, ProductOut

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ProductOut",
    "ProductListResponse",
    "ProductDetailResponse",
]
