"""Tests for the presentation layouts."""

import pytest

from catalog.core.formatting import StockThresholds, StockTier
from catalog.core.table_engine import TableViewEngine
from catalog.views.layouts import Layout, build_layouts, get_layout, truncate


def test_truncate_appends_ellipsis_only_when_cut():
    assert truncate("pendek", 10) == "pendek"
    assert truncate("x" * 10, 10) == "x" * 10
    assert truncate("x" * 11, 10) == "x" * 10 + "..."


class TestLayoutRegistry:
    """Tests for layout lookup."""

    def test_all_layouts_available(self):
        assert set(build_layouts()) == {"table", "grid", "mobile", "simple"}

    @pytest.mark.parametrize(
        ("name", "limit", "medium", "high"),
        [
            ("table", 50, 10, 50),
            ("grid", 100, 55, 70),
            ("mobile", 80, 50, 80),
            ("simple", None, 10, 50),
        ],
    )
    def test_layout_settings(self, name, limit, medium, high):
        layout = get_layout(name)
        assert layout.description_limit == limit
        assert layout.thresholds == StockThresholds(medium=medium, high=high)

    def test_unknown_layout(self):
        with pytest.raises(ValueError, match="Unknown layout"):
            get_layout("carousel")


class TestRenderRow:
    """Tests for Layout.render_row."""

    def test_formats_display_fields(self, sample_records):
        row = get_layout("table").render_row(sample_records[0])

        assert row.product_id == "1"
        assert row.category == "KAT-5"
        assert row.name == "Nasi Goreng"
        assert row.initial == "N"
        assert row.price == "Rp 12.000"
        assert row.stock_text == "15 unit"
        assert row.stock_tier is StockTier.MEDIUM
        assert row.stock_label == "Sedang"
        assert row.line_total == "Rp 180.000"

    def test_description_truncated_per_layout(self):
        record = {"product_id": 1, "product_name": "Soto", "description": "a" * 120}

        assert get_layout("table").render_row(record).description == "a" * 50 + "..."
        assert get_layout("mobile").render_row(record).description == "a" * 80 + "..."
        assert get_layout("grid").render_row(record).description == "a" * 100 + "..."
        assert get_layout("simple").render_row(record).description == ""

    def test_missing_description_shows_dash(self, sample_records):
        assert get_layout("table").render_row(sample_records[2]).description == "-"
        assert get_layout("table").render_row(sample_records[6]).description == "-"

    def test_same_stock_differs_across_layouts(self):
        record = {"product_id": 1, "product_name": "Kopi", "stock": 60}

        assert get_layout("table").render_row(record).stock_tier is StockTier.HIGH
        assert get_layout("grid").render_row(record).stock_tier is StockTier.MEDIUM
        assert get_layout("mobile").render_row(record).stock_tier is StockTier.MEDIUM

    def test_malformed_record_renders(self):
        row = get_layout("grid").render_row({"product_id": 3, "price": "abc", "stock": None})

        assert row.name == ""
        assert row.initial == ""
        assert row.price == "-"
        assert row.stock_text == "0 unit"
        assert row.stock_tier is StockTier.LOW
        assert row.line_total == "-"

    def test_oversized_values_render(self):
        engine = TableViewEngine([{"product_id": 1, "product_name": "Emas", "price": 1e30, "stock": 1}])

        screen = get_layout("table").render(engine)

        assert screen.rows[0].price == screen.rows[0].line_total
        assert screen.rows[0].price.startswith("Rp 1.000.000")
        assert screen.summary.inventory_value == screen.rows[0].price


class TestRender:
    """Tests for Layout.render over an engine."""

    def test_renders_current_page_and_summary(self, sample_records):
        engine = TableViewEngine(sample_records, page_size=5)
        engine.go_to_page(2)

        view = get_layout("table").render(engine)

        assert [r.product_id for r in view.rows] == ["6", "7"]
        assert view.summary.total_products == 7
        assert view.summary.matched == 7
        assert view.summary.shown == 2
        assert view.summary.current_page == 2
        assert view.summary.total_pages == 2
        assert view.summary.inventory_value == "Rp 2.569.000"
        assert view.empty_message is None

    def test_empty_messages(self, sample_records):
        layout = Layout(name="custom", thresholds=StockThresholds(medium=1, high=2))

        assert layout.render(TableViewEngine([], page_size=5)).empty_message == "Tidak ada data produk"

        engine = TableViewEngine(sample_records, page_size=5)
        engine.search("pizza")
        assert layout.render(engine).empty_message == "Produk tidak ditemukan"
