"""Shared fixtures."""

from collections.abc import AsyncGenerator, Sequence
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog.api.deps import get_product_repository
from catalog.main import app
from catalog.models.product import Product


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Product records as the API returns them."""
    return [
        {"product_id": 1, "category_id": 5, "product_name": "Nasi Goreng",
         "price": 12000, "stock": 15, "description": "Nasi goreng spesial"},
        {"product_id": 2, "category_id": 5, "product_name": "Mie Goreng",
         "price": 10000, "stock": 60, "description": "Mie goreng Jawa"},
        {"product_id": 3, "category_id": 6, "product_name": "Es Teh Manis",
         "price": 5000, "stock": 120, "description": None},
        {"product_id": 4, "category_id": 12, "product_name": "Jus Alpukat",
         "price": 15000, "stock": 25, "description": "Alpukat segar"},
        {"product_id": 5, "category_id": 7, "product_name": "kerupuk udang",
         "price": 3000, "stock": 200},
        {"product_id": 6, "category_id": 7, "product_name": "Pisang Goreng",
         "price": 8000, "stock": 8, "description": "Pisang kepok"},
        {"product_id": 7, "category_id": 6, "product_name": "Teh Tarik",
         "price": 5000, "stock": 30, "description": ""},
    ]


class FakeProductRepository:
    """In-memory stand-in for ProductRepository."""

    def __init__(self, products: Sequence[Product], error: Exception | None = None) -> None:
        self.products = list(products)
        self.error = error

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    async def list_all(self) -> list[Product]:
        self._check()
        return sorted(self.products, key=lambda p: p.product_id)

    async def get_by_id(self, product_id: int) -> Product | None:
        self._check()
        return next((p for p in self.products if p.product_id == product_id), None)

    async def search(self, keyword: str) -> list[Product]:
        self._check()
        needle = keyword.lower()
        found = [
            p for p in self.products
            if needle in p.product_name.lower() or needle in (p.description or "").lower()
        ]
        return sorted(found, key=lambda p: (-p.stock, p.product_id))


@pytest.fixture
def db_products() -> list[Product]:
    return [
        Product(product_id=1, category_id=5, product_name="Nasi Goreng",
                price=Decimal("12000.00"), stock=15, description="Nasi goreng spesial"),
        Product(product_id=2, category_id=5, product_name="Mie Goreng",
                price=Decimal("10000.00"), stock=60, description="Mie goreng Jawa"),
        Product(product_id=3, category_id=6, product_name="Es Teh Manis",
                price=Decimal("5000.00"), stock=120, description=None),
    ]


@pytest.fixture
def fake_repository(db_products: list[Product]) -> FakeProductRepository:
    return FakeProductRepository(db_products)


@pytest_asyncio.fixture
async def client(fake_repository: FakeProductRepository) -> AsyncGenerator[AsyncClient, None]:
    """API client with the product repository replaced by an in-memory fake."""
    app.dependency_overrides[get_product_repository] = lambda: fake_repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
