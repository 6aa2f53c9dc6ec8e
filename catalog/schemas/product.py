"""Product schemas for the catalog API.

Response envelopes mirror what the views expect:
- list/search: {"success": true, "data": [...], "total": n}
- detail: {"success": true, "data": {...}}
"""

from pydantic import BaseModel, ConfigDict, Field


class ProductOut(BaseModel):
    """Single product as serialized by the API."""

    model_config = ConfigDict(from_attributes=True)

    product_id: int
    category_id: int
    product_name: str
    price: float = Field(ge=0, description="Whole-unit price")
    stock: int = Field(ge=0)
    description: str | None = None


class ProductListResponse(BaseModel):
    """Full, unpaginated product list."""

    success: bool = Field(default=True)
    data: list[ProductOut] = Field(default_factory=list)
    total: int = Field(description="Number of products in data")


class ProductDetailResponse(BaseModel):
    """Single product lookup."""

    success: bool = Field(default=True)
    data: ProductOut
