"""Standalone printable document of the filtered product set.

Rendered into a fresh HTML string from a Jinja2 template; nothing outside
the returned document is touched, and no interactive controls (search box,
buttons, pagination) are part of it.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from catalog.config import settings
from catalog.views.layouts import Layout, get_layout

_env = Environment(
    loader=PackageLoader("catalog", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

PRINT_TEMPLATE = "print.html"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def to_printable(
    records: Iterable[Mapping[str, Any]],
    layout: Layout | None = None,
    title: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Render records as a printable HTML document.

    Args:
        records: Filtered (not paginated) records, in display order
        layout: Layout whose row formatting is used (defaults to "table")
        title: Document title (defaults to settings)
        generated_at: Generation timestamp (defaults to now)

    Returns:
        Complete HTML document
    """
    layout = layout or get_layout("table")
    rows = [layout.render_row(record) for record in records]
    generated_at = generated_at or datetime.now()

    template = _env.get_template(PRINT_TEMPLATE)
    return template.render(
        title=title or settings.print_title,
        generated_at=generated_at.strftime(TIMESTAMP_FORMAT),
        total=len(rows),
        rows=rows,
        show_description=layout.description_limit is not None,
    )
