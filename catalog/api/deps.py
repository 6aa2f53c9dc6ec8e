"""FastAPI dependencies for dependency injection.

Provides:
- Database session
- Product repository bound to that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infra.database import get_db_session
from catalog.services.product_repository import ProductRepository


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for the duration of a request."""
    async with get_db_session() as session:
        yield session


async def get_product_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductRepository:
    """Get product repository dependency."""
    return ProductRepository(db)


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]
Products = Annotated[ProductRepository, Depends(get_product_repository)]
