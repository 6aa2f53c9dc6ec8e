"""Table view engine: search filter -> sort -> paginate.

The module-level functions are pure and never mutate their input. The
TableViewEngine holds the raw records of one view together with its view
state (search term, sort, page) and recomputes the visible rows from them
on demand.

Example:
    engine = TableViewEngine(records, page_size=5)
    engine.search("goreng")
    engine.sort_by("price")
    page = engine.page()
    page.visible, page.total_pages
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any

from catalog.config import settings
from catalog.core.formatting import category_label, display_text, to_number
from catalog.infra.logging import get_logger

logger = get_logger(__name__)

Record = Mapping[str, Any]

SEARCH_FIELDS = ("product_name", "description", "category_id")


class SortKey(str, Enum):
    """Columns the table can be sorted by."""

    NONE = "none"
    PRODUCT_ID = "product_id"
    CATEGORY_ID = "category_id"
    PRODUCT_NAME = "product_name"
    PRICE = "price"
    STOCK = "stock"

    @property
    def is_numeric(self) -> bool:
        return self in (SortKey.PRODUCT_ID, SortKey.PRICE, SortKey.STOCK)


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def arrow(self) -> str:
        return "↑" if self is SortDirection.ASCENDING else "↓"


# =============================================================================
# Filter
# =============================================================================


def matches_search(record: Record, search_term: str) -> bool:
    """Case-insensitive substring match on name, description or category id.

    Absent fields match as empty strings.
    """
    if not search_term:
        return True
    needle = search_term.lower()
    return any(needle in display_text(record.get(name)).lower() for name in SEARCH_FIELDS)


def filter_records(records: Iterable[Record], search_term: str) -> list[Record]:
    """Records matching the search term, in input order."""
    if not search_term:
        return list(records)
    return [record for record in records if matches_search(record, search_term)]


# =============================================================================
# Sort
# =============================================================================


def _sort_text(record: Record, key: SortKey) -> str:
    if key is SortKey.CATEGORY_ID:
        return category_label(record.get("category_id")).lower()
    return display_text(record.get(key.value)).lower()


def _compare(a: Record, b: Record, key: SortKey, descending: bool) -> int:
    if key.is_numeric:
        left = to_number(a.get(key.value))
        right = to_number(b.get(key.value))
        # Unreadable numbers go last in both directions
        if left is None or right is None:
            return (left is None) - (right is None)
    else:
        left = _sort_text(a, key)
        right = _sort_text(b, key)

    result = (left > right) - (left < right)
    return -result if descending else result


def sort_records(
    records: Iterable[Record],
    sort_key: SortKey | str = SortKey.NONE,
    direction: SortDirection | str = SortDirection.ASCENDING,
) -> list[Record]:
    """Stable sort of records by one column.

    SortKey.NONE keeps the input order. Descending flips the comparison,
    so records with equal keys keep their input order either way.
    """
    key = SortKey(sort_key)
    descending = SortDirection(direction) is SortDirection.DESCENDING
    if key is SortKey.NONE:
        return list(records)
    return sorted(records, key=cmp_to_key(lambda a, b: _compare(a, b, key, descending)))


# =============================================================================
# Paginate
# =============================================================================


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages; an empty set still has one (empty) page."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


@dataclass(frozen=True)
class Page:
    """One page of rows plus the numbers the pagination controls need."""

    visible: list[Record]
    current_page: int
    page_size: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_numbers(self) -> range:
        return range(1, self.total_pages + 1)


def paginate(records: Sequence[Record], page_size: int, current_page: int) -> Page:
    """Slice out one page.

    An out-of-range page gives an empty slice rather than an error;
    callers clamp current_page first.
    """
    total_pages = count_pages(len(records), page_size)
    if current_page < 1:
        visible: list[Record] = []
    else:
        start = (current_page - 1) * page_size
        visible = list(records[start:start + page_size])
    return Page(
        visible=visible,
        current_page=current_page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=len(records),
    )


# =============================================================================
# Stateful engine
# =============================================================================


@dataclass
class TableViewState:
    """Interactive state of one table view."""

    page_size: int
    search_term: str = ""
    sort_key: SortKey = SortKey.NONE
    sort_direction: SortDirection = SortDirection.ASCENDING
    current_page: int = 1


class TableViewEngine:
    """Raw records of one view plus its search/sort/page state.

    Records are replaced wholesale by load(); the engine keeps its own
    copy and never mutates it.
    """

    def __init__(self, records: Iterable[Record] = (), page_size: int | None = None) -> None:
        """Initialize the engine with default view state.

        Args:
            records: Initial raw records
            page_size: Rows per page (defaults to settings)
        """
        size = page_size if page_size is not None else settings.page_size
        count_pages(0, size)
        self.records: tuple[Record, ...] = tuple(records)
        self.state = TableViewState(page_size=size)

    # --- mutations ----------------------------------------------------------

    def load(self, records: Iterable[Record]) -> None:
        """Replace the raw records and re-clamp the current page."""
        self.records = tuple(records)
        self._clamp_page()
        logger.debug("Table records loaded", count=len(self.records))

    def search(self, search_term: str) -> None:
        """Set the search term; returns to page 1."""
        self.state.search_term = search_term or ""
        self.state.current_page = 1

    def sort_by(self, sort_key: SortKey | str) -> None:
        """Header-click sort: the active ascending key flips to descending,
        anything else sorts ascending. Returns to page 1.
        """
        key = SortKey(sort_key)
        if (
            key is self.state.sort_key
            and self.state.sort_direction is SortDirection.ASCENDING
            and key is not SortKey.NONE
        ):
            direction = SortDirection.DESCENDING
        else:
            direction = SortDirection.ASCENDING
        self.set_sort(key, direction)

    def set_sort(self, sort_key: SortKey | str, direction: SortDirection | str) -> None:
        self.state.sort_key = SortKey(sort_key)
        self.state.sort_direction = SortDirection(direction)
        self.state.current_page = 1

    def go_to_page(self, page: int) -> int:
        """Move to a page, clamped into range. Returns the page landed on."""
        self.state.current_page = clamp_page(page, self.total_pages)
        return self.state.current_page

    def next_page(self) -> int:
        return self.go_to_page(self.state.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.state.current_page - 1)

    def set_page_size(self, page_size: int) -> None:
        """Change rows per page, keeping the current page in range."""
        count_pages(0, page_size)
        self.state.page_size = page_size
        self._clamp_page()

    def reset(self) -> None:
        """Back to defaults (keeps page size), as on a manual refresh."""
        self.state = TableViewState(page_size=self.state.page_size)

    def _clamp_page(self) -> None:
        self.state.current_page = clamp_page(self.state.current_page, self.total_pages)

    # --- derived views ------------------------------------------------------

    @property
    def filtered(self) -> list[Record]:
        """Records matching the search term, in raw order."""
        return filter_records(self.records, self.state.search_term)

    @property
    def sorted_rows(self) -> list[Record]:
        """Filtered records in display order; what exports operate on."""
        return sort_records(self.filtered, self.state.sort_key, self.state.sort_direction)

    @property
    def total_pages(self) -> int:
        return count_pages(len(self.filtered), self.state.page_size)

    def page(self) -> Page:
        """The current page of the filtered, sorted rows."""
        return paginate(self.sorted_rows, self.state.page_size, self.state.current_page)

    @property
    def visible_rows(self) -> list[Record]:
        return self.page().visible
