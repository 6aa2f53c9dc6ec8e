"""Product repository - read-only SQL queries behind the catalog API."""

from collections.abc import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infra.logging import get_logger
from catalog.models.product import Product

logger = get_logger(__name__)


class ProductRepository:
    """Queries against the `products` table.

    Every query returns the full, unpaginated result; paging and
    filtering for display happen in the views.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[Product]:
        """All products ordered by product_id ascending."""
        result = await self._session.execute(
            select(Product).order_by(Product.product_id.asc())
        )
        products = result.scalars().all()
        logger.debug("Products listed", count=len(products))
        return products

    async def get_by_id(self, product_id: int) -> Product | None:
        """Single product, or None when absent."""
        return await self._session.get(Product, product_id)

    async def search(self, keyword: str) -> Sequence[Product]:
        """Case-insensitive substring search on name and description.

        LIKE wildcards in the keyword match literally. Results are ordered
        by stock descending, product_id breaking ties.
        """
        stmt = (
            select(Product)
            .where(
                or_(
                    Product.product_name.icontains(keyword, autoescape=True),
                    Product.description.icontains(keyword, autoescape=True),
                )
            )
            .order_by(Product.stock.desc(), Product.product_id.asc())
        )
        result = await self._session.execute(stmt)
        products = result.scalars().all()
        logger.debug("Products searched", keyword=keyword, count=len(products))
        return products
