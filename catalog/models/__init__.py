"""SQLAlchemy models for the catalog.

All models are READ-ONLY. The API exposes no write endpoints.
"""

from catalog.models.base import Base
from catalog.models.product import Product

__all__ = [
    "Base",
    "Product",
]
