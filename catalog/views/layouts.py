"""Presentation adapters over the table view engine.

Each layout (table, grid, mobile, simple) is a thin renderer: the engine
decides which records are visible and in what order, the layout only
decides how a record looks (stock tier cut points, description length).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from catalog.config import settings
from catalog.core.formatting import (
    EMPTY_VALUE,
    StockThresholds,
    StockTier,
    category_label,
    display_text,
    format_currency,
    inventory_value,
    line_value,
    stock_status,
)
from catalog.core.table_engine import Page, TableViewEngine

ELLIPSIS = "..."


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` characters, appending "..." only if cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


@dataclass(frozen=True)
class RowView:
    """One product as displayed on screen (and in the printout)."""

    product_id: str
    category: str
    name: str
    initial: str
    description: str
    price: str
    stock_text: str
    stock_tier: StockTier
    line_total: str

    @property
    def stock_label(self) -> str:
        return self.stock_tier.label


@dataclass(frozen=True)
class Summary:
    """Footer statistics of a view."""

    total_products: int
    matched: int
    shown: int
    current_page: int
    total_pages: int
    inventory_value: str


@dataclass(frozen=True)
class LayoutView:
    """Everything a layout needs to draw one screen."""

    layout: str
    rows: list[RowView]
    page: Page
    summary: Summary
    search_term: str
    empty_message: str | None


@dataclass(frozen=True)
class Layout:
    """Display rules of one view.

    Attributes:
        name: Layout identifier
        thresholds: Stock tier cut points
        description_limit: Max description characters, None hides descriptions
    """

    name: str
    thresholds: StockThresholds
    description_limit: int | None = None

    def render_row(self, record: Mapping[str, Any]) -> RowView:
        name = display_text(record.get("product_name"))
        description = display_text(record.get("description"))
        if self.description_limit is None:
            description = ""
        elif description:
            description = truncate(description, self.description_limit)
        else:
            description = EMPTY_VALUE

        stock = record.get("stock")
        total = line_value(record)
        return RowView(
            product_id=display_text(record.get("product_id")),
            category=category_label(record.get("category_id")),
            name=name,
            initial=name[:1].upper(),
            description=description,
            price=format_currency(record.get("price")),
            stock_text=f"{display_text(stock) or 0} unit",
            stock_tier=stock_status(stock, self.thresholds),
            line_total=format_currency(total) if total is not None else EMPTY_VALUE,
        )

    def render(self, engine: TableViewEngine) -> LayoutView:
        """Render the engine's current page."""
        page = engine.page()
        rows = [self.render_row(record) for record in page.visible]

        empty_message = None
        if not rows:
            empty_message = (
                "Produk tidak ditemukan" if engine.state.search_term else "Tidak ada data produk"
            )

        summary = Summary(
            total_products=len(engine.records),
            matched=page.total_items,
            shown=len(rows),
            current_page=page.current_page,
            total_pages=page.total_pages,
            inventory_value=format_currency(inventory_value(engine.records)),
        )
        return LayoutView(
            layout=self.name,
            rows=rows,
            page=page,
            summary=summary,
            search_term=engine.state.search_term,
            empty_message=empty_message,
        )


def build_layouts() -> dict[str, Layout]:
    """Layouts keyed by name, thresholds taken from settings."""
    return {
        "table": Layout(
            name="table",
            thresholds=StockThresholds.from_pair(settings.table_stock_thresholds),
            description_limit=50,
        ),
        "grid": Layout(
            name="grid",
            thresholds=StockThresholds.from_pair(settings.grid_stock_thresholds),
            description_limit=100,
        ),
        "mobile": Layout(
            name="mobile",
            thresholds=StockThresholds.from_pair(settings.mobile_stock_thresholds),
            description_limit=80,
        ),
        "simple": Layout(
            name="simple",
            thresholds=StockThresholds.from_pair(settings.simple_stock_thresholds),
        ),
    }


def get_layout(name: str) -> Layout:
    """Look up a layout by name.

    Raises:
        ValueError: If no layout has that name
    """
    layouts = build_layouts()
    try:
        return layouts[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout '{name}', expected one of {sorted(layouts)}"
        ) from None
