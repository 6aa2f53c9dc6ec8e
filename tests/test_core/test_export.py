"""Tests for CSV export."""

import csv
import io
from datetime import date

from catalog.core.export import CSV_HEADER, build_csv_export, export_filename, to_csv


def parse(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


class TestToCsv:
    """Tests for to_csv."""

    def test_header_and_column_order(self):
        text = to_csv([
            {"product_id": 1, "category_id": 5, "product_name": "Nasi Goreng",
             "price": 12000, "stock": 15, "description": "Pedas"},
        ])

        rows = parse(text)
        assert rows[0] == list(CSV_HEADER)
        assert rows[1] == ["1", "KAT-5", "Nasi Goreng", "12000", "15", "Pedas"]

    def test_every_field_is_quoted(self):
        text = to_csv([{"product_id": 1, "category_id": 5, "product_name": "Tahu",
                        "price": 2000, "stock": 3}])

        lines = text.split("\n")
        assert lines[1] == '"1","KAT-5","Tahu","2000","3",""'
        assert text.endswith("\n")

    def test_quotes_and_commas_round_trip(self):
        description = 'has a "quote" and, a comma'
        text = to_csv([{"product_id": 7, "category_id": 1, "product_name": "Kopi",
                        "price": 9000, "stock": 4, "description": description}])

        assert '"has a ""quote"" and, a comma"' in text
        assert parse(text)[1][5] == description

    def test_embedded_newline_round_trips(self):
        description = "baris satu\nbaris dua"
        text = to_csv([{"product_id": 8, "product_name": "Roti", "description": description}])

        rows = parse(text)
        assert len(rows) == 2
        assert rows[1][5] == description

    def test_missing_fields_export_as_empty(self):
        rows = parse(to_csv([{"product_id": 9}]))
        assert rows[1] == ["9", "KAT-", "", "", "", ""]

    def test_price_is_raw_not_currency_formatted(self):
        rows = parse(to_csv([{"product_id": 1, "price": "12000.00", "stock": 2}]))
        assert rows[1][3] == "12000.00"

    def test_empty_set_has_header_only(self):
        assert parse(to_csv([])) == [list(CSV_HEADER)]


def test_export_filename_uses_iso_date():
    assert export_filename(date(2024, 3, 9)) == "products_2024-03-09.csv"


def test_export_filename_defaults_to_today():
    assert export_filename() == f"products_{date.today().isoformat()}.csv"


def test_build_csv_export(sample_records):
    export = build_csv_export(sample_records, day=date(2024, 1, 31))

    assert export.filename == "products_2024-01-31.csv"
    assert export.row_count == len(sample_records)
    assert export.media_type == "text/csv"
    assert export.encode().startswith(b"\xef\xbb\xbf")
    assert len(parse(export.content)) == len(sample_records) + 1
