"""Async access to the products database.

The API only reads: request sessions run inside a READ ONLY transaction
that is rolled back when the request ends. Writable sessions exist for the
seed script.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog.config import settings
from catalog.infra.logging import get_logger
from catalog.models import Product

logger = get_logger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the async engine for the products database."""
    global _engine

    if _engine is None:
        logger.info(
            "Creating database engine",
            host=settings.db_host,
            database=settings.db_name,
            pool_size=settings.db_pool_size,
        )
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
            pool_pre_ping=True,
            echo=settings.debug,
            connect_args={"server_settings": {"application_name": settings.service_name}},
        )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session(read_only: bool = True) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the products database.

    Args:
        read_only: Run the transaction READ ONLY and roll it back on exit.
            Pass False to commit on clean exit instead.

    Example:
        async with get_db_session() as session:
            products = await ProductRepository(session).list_all()
    """
    session = get_session_factory()()

    try:
        if read_only:
            await session.execute(text("SET TRANSACTION READ ONLY"))
        yield session
        if read_only:
            await session.rollback()
        else:
            await session.commit()

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", read_only=read_only, error=str(e))
        raise

    finally:
        await session.close()


async def close_db_engine() -> None:
    """Dispose the engine; called on application shutdown."""
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Check that the products table is reachable.

    Returns:
        True if the table answered a count query, False otherwise
    """
    try:
        async with get_db_session() as session:
            count = await session.scalar(select(func.count()).select_from(Product))
    except Exception as e:
        logger.error("Products table unreachable", error=str(e))
        return False

    logger.info("Products table reachable", product_count=count)
    return True
