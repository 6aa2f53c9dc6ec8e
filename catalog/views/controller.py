"""View controller: one product view from fetch to screen.

Owns the CatalogClient call, the TableViewEngine state and the layout used
to render it. Fetch and export failures end up in `status`/`message` for
the view to show. A cancelled fetch still propagates its CancelledError,
after moving the view to the error state.
"""

import csv
from datetime import date, datetime
from enum import Enum

from jinja2 import TemplateError

from catalog.core.export import CsvExport, build_csv_export
from catalog.core.table_engine import SortDirection, SortKey, TableViewEngine
from catalog.infra.logging import get_logger
from catalog.services.catalog_client import CatalogClient, FetchResult, get_catalog_client
from catalog.views.layouts import Layout, LayoutView, get_layout
from catalog.views.printable import to_printable

logger = get_logger(__name__)


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ProductTableView:
    """Product list view backed by the catalog API.

    Example:
        view = ProductTableView(layout="grid")
        await view.load()
        view.search("goreng")
        screen = view.render()
    """

    LOAD_ERROR_MESSAGE = "Gagal mengambil data produk"
    EXPORT_ERROR_MESSAGE = "Gagal mengekspor data ke CSV"
    PRINT_ERROR_MESSAGE = "Gagal menyiapkan dokumen cetak"

    def __init__(
        self,
        client: CatalogClient | None = None,
        layout: Layout | str = "table",
        page_size: int | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            client: Catalog API client (defaults to the shared client)
            layout: Layout or layout name
            page_size: Rows per page (defaults to settings)
        """
        self.client = client or get_catalog_client()
        self.layout = get_layout(layout) if isinstance(layout, str) else layout
        self.engine = TableViewEngine(page_size=page_size)
        self.status = ViewStatus.IDLE
        self.message: str | None = None
        self._in_flight = False

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    # --- data loading -------------------------------------------------------

    async def load(self) -> FetchResult | None:
        """Fetch all products and replace the view's records.

        Returns:
            The fetch result, or None if a fetch was already in flight
        """
        if self._in_flight:
            logger.info("Fetch already in flight, ignoring", layout=self.layout.name)
            return None

        self._in_flight = True
        self.status = ViewStatus.LOADING
        try:
            result = await self.client.list_products()
        except BaseException:
            # Cancelled or crashed fetch: nothing was loaded
            self.status = ViewStatus.ERROR
            self.message = self.LOAD_ERROR_MESSAGE
            logger.warning("Product fetch interrupted", layout=self.layout.name)
            raise
        finally:
            self._in_flight = False

        if result.ok:
            self.engine.load(result.records)
            self.status = ViewStatus.READY
            self.message = None
        else:
            # Previous records stay until a fetch succeeds
            self.status = ViewStatus.ERROR
            self.message = result.message
            logger.warning("Product view failed to load", layout=self.layout.name, message=result.message)
        return result

    async def refresh(self) -> FetchResult | None:
        """Manual refresh: clear search, sort and page, then fetch again.

        Ignored (returns None) while a fetch is in flight.
        """
        if self._in_flight:
            logger.info("Refresh ignored, fetch in flight", layout=self.layout.name)
            return None
        self.engine.reset()
        return await self.load()

    async def detail(self, product_id: int) -> FetchResult:
        """Look up one product; NOT_FOUND and ERROR are distinct statuses."""
        return await self.client.get_product(product_id)

    # --- interaction --------------------------------------------------------

    def search(self, search_term: str) -> None:
        self.engine.search(search_term)

    def sort_by(self, sort_key: SortKey | str) -> None:
        self.engine.sort_by(sort_key)

    def sort_indicator(self, sort_key: SortKey | str) -> str:
        """Arrow shown next to a column header, empty if not the sort column."""
        if SortKey(sort_key) is not self.engine.state.sort_key:
            return ""
        return SortDirection(self.engine.state.sort_direction).arrow

    def go_to_page(self, page: int) -> int:
        return self.engine.go_to_page(page)

    def next_page(self) -> int:
        return self.engine.next_page()

    def previous_page(self) -> int:
        return self.engine.previous_page()

    def render(self) -> LayoutView:
        return self.layout.render(self.engine)

    # --- export -------------------------------------------------------------

    def export_csv(self, day: date | None = None) -> CsvExport | None:
        """CSV of every filtered row in display order, regardless of page.

        Returns:
            The export, or None with `message` set if serialization failed
        """
        try:
            export = build_csv_export(self.engine.sorted_rows, day=day)
        except (csv.Error, ArithmeticError, ValueError, TypeError) as e:
            logger.error("CSV export failed", layout=self.layout.name, error=str(e))
            self.message = self.EXPORT_ERROR_MESSAGE
            return None

        logger.info("CSV exported", filename=export.filename, rows=export.row_count)
        return export

    def printable(self, generated_at: datetime | None = None) -> str | None:
        """Printable HTML of every filtered row in display order.

        Returns:
            The document, or None with `message` set if rendering failed
        """
        try:
            return to_printable(
                self.engine.sorted_rows,
                layout=self.layout,
                generated_at=generated_at,
            )
        except (TemplateError, ArithmeticError, ValueError, TypeError) as e:
            logger.error("Print rendering failed", layout=self.layout.name, error=str(e))
            self.message = self.PRINT_ERROR_MESSAGE
            return None
