#!/usr/bin/env python
"""Seed a local products database for the catalog API.

This script:
1. Creates the products table if it does not exist
2. Inserts a sample product set when the table is empty

Usage:
    # Create table and seed sample products
    python scripts/seed_products.py

    # Drop existing rows first
    python scripts/seed_products.py --reset

    # Print the products currently stored
    python scripts/seed_products.py --list
"""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete, func, select

from catalog.core.formatting import format_currency
from catalog.infra.database import close_db_engine, get_db_session, get_engine
from catalog.infra.logging import get_logger, setup_logging
from catalog.models import Base, Product

setup_logging()
logger = get_logger(__name__)


SAMPLE_PRODUCTS = [
    {"category_id": 5, "product_name": "Nasi Goreng", "price": Decimal(12000), "stock": 15,
     "description": "Nasi goreng spesial dengan telur dan kerupuk"},
    {"category_id": 5, "product_name": "Mie Goreng", "price": Decimal(10000), "stock": 60,
     "description": "Mie goreng Jawa dengan sayuran"},
    {"category_id": 5, "product_name": "Sate Ayam", "price": Decimal(20000), "stock": 40,
     "description": "Sepuluh tusuk sate ayam dengan bumbu kacang"},
    {"category_id": 6, "product_name": "Es Teh Manis", "price": Decimal(5000), "stock": 120,
     "description": None},
    {"category_id": 6, "product_name": "Jus Alpukat", "price": Decimal(15000), "stock": 25,
     "description": "Alpukat segar, susu cokelat"},
    {"category_id": 7, "product_name": "Kerupuk Udang", "price": Decimal(3000), "stock": 200,
     "description": "Kerupuk udang renyah"},
    {"category_id": 7, "product_name": "Pisang Goreng", "price": Decimal(8000), "stock": 8,
     "description": "Pisang kepok goreng tepung"},
]


async def ensure_products_table() -> bool:
    """Ensure the products table exists in the database."""
    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("products table ensured")
        return True
    except Exception as e:
        logger.error("Failed to create products table", error=str(e))
        return False


async def seed_products(reset: bool) -> int:
    """Insert sample products unless the table already has rows.

    Returns:
        Number of rows inserted
    """
    async with get_db_session(read_only=False) as session:
        if reset:
            await session.execute(delete(Product))
            logger.info("Existing products removed")

        existing = await session.scalar(select(func.count()).select_from(Product))
        if existing:
            logger.info("Products already present, skipping seed", count=existing)
            return 0

        session.add_all(Product(**values) for values in SAMPLE_PRODUCTS)

    logger.info("Sample products inserted", count=len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)


async def list_products() -> None:
    """Print stored products."""
    async with get_db_session() as session:
        result = await session.execute(select(Product).order_by(Product.product_id))
        for product in result.scalars():
            print(
                f"#{product.product_id:<4} KAT-{product.category_id:<3} "
                f"{product.product_name:<20} {format_currency(product.price):>12} "
                f"{product.stock:>5} unit"
            )


async def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the products database")
    parser.add_argument("--reset", action="store_true", help="Delete existing products first")
    parser.add_argument("--list", action="store_true", help="List stored products and exit")
    args = parser.parse_args()

    try:
        if not await ensure_products_table():
            return 1

        if args.list:
            await list_products()
            return 0

        await seed_products(reset=args.reset)
        return 0
    finally:
        await close_db_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
