"""Core module - table view engine, export and display formatting."""

from catalog.core.export import CsvExport, build_csv_export, export_filename, to_csv
from catalog.core.formatting import (
    StockThresholds,
    StockTier,
    format_currency,
    inventory_value,
    stock_status,
)
from catalog.core.table_engine import (
    Page,
    SortDirection,
    SortKey,
    TableViewEngine,
    TableViewState,
    filter_records,
    paginate,
    sort_records,
)

__all__ = [
    "CsvExport",
    "build_csv_export",
    "export_filename",
    "to_csv",
    "StockThresholds",
    "StockTier",
    "format_currency",
    "inventory_value",
    "stock_status",
    "Page",
    "SortDirection",
    "SortKey",
    "TableViewEngine",
    "TableViewState",
    "filter_records",
    "paginate",
    "sort_records",
]
