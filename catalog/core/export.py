"""CSV export of the filtered product set."""

import csv
import io
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from catalog.core.formatting import category_label, display_text

CSV_HEADER = ("ID Produk", "Kategori", "Nama Produk", "Harga", "Stok", "Deskripsi")
CSV_MEDIA_TYPE = "text/csv"
# BOM so spreadsheet apps pick up UTF-8 product names
CSV_ENCODING = "utf-8-sig"


def csv_row(record: Mapping[str, Any]) -> list[str]:
    """Export columns for one record: raw numbers, KAT- category label."""
    return [
        display_text(record.get("product_id")),
        category_label(record.get("category_id")),
        display_text(record.get("product_name")),
        display_text(record.get("price")),
        display_text(record.get("stock")),
        display_text(record.get("description")),
    ]


def to_csv(records: Iterable[Mapping[str, Any]]) -> str:
    """Serialize records to CSV text.

    Every field is quoted; embedded quotes are doubled and embedded
    newlines stay inside their quoted field. Rows end with "\\n".
    """
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow(csv_row(record))
    return output.getvalue()


def export_filename(day: date | None = None) -> str:
    """products_<ISO date>.csv, dated today unless given."""
    return f"products_{(day or date.today()).isoformat()}.csv"


@dataclass(frozen=True)
class CsvExport:
    """A ready-to-save CSV export."""

    filename: str
    content: str
    row_count: int

    @property
    def media_type(self) -> str:
        return CSV_MEDIA_TYPE

    def encode(self) -> bytes:
        return self.content.encode(CSV_ENCODING)


def build_csv_export(records: Iterable[Mapping[str, Any]], day: date | None = None) -> CsvExport:
    rows = list(records)
    return CsvExport(filename=export_filename(day), content=to_csv(rows), row_count=len(rows))
