"""Presentation layer - layouts, printable output and the view controller."""

from catalog.views.controller import ProductTableView, ViewStatus
from catalog.views.layouts import Layout, LayoutView, RowView, Summary, build_layouts, get_layout
from catalog.views.printable import to_printable

__all__ = [
    "ProductTableView",
    "ViewStatus",
    "Layout",
    "LayoutView",
    "RowView",
    "Summary",
    "build_layouts",
    "get_layout",
    "to_printable",
]
