"""Display helpers shared by every layout: currency, stock tier, totals."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import Any

from catalog.config import settings

EMPTY_VALUE = "-"


def to_number(value: Any) -> Decimal | None:
    """Read a record value as a number.

    Accepts ints, floats, Decimals and numeric strings (PostgreSQL numeric
    columns often arrive as "12000.00"). Booleans, NaN/infinity and anything
    unparsable return None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def format_currency(amount: Any, symbol: str | None = None) -> str:
    """Format a whole-unit amount, e.g. 12000 -> "Rp 12.000".

    No fractional digits, "." as thousands separator, symbol prefix.
    Unreadable amounts render as "-".
    """
    number = to_number(amount)
    if number is None:
        return EMPTY_VALUE

    symbol = settings.currency_symbol if symbol is None else symbol
    with localcontext() as ctx:
        # Whole-unit rounding must keep every integer digit
        ctx.prec = max(ctx.prec, number.adjusted() + 2)
        whole = number.quantize(Decimal(1), rounding=ROUND_HALF_UP)
        grouped = f"{abs(whole):,.0f}".replace(",", ".")
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol} {grouped}" if symbol else f"{sign}{grouped}"


class StockTier(str, Enum):
    """Three-way stock classification used for display styling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]

    @property
    def label(self) -> str:
        return _TIER_LABEL[self]


_TIER_RANK = {StockTier.LOW: 0, StockTier.MEDIUM: 1, StockTier.HIGH: 2}
_TIER_LABEL = {StockTier.LOW: "Sedikit", StockTier.MEDIUM: "Sedang", StockTier.HIGH: "Banyak"}


@dataclass(frozen=True)
class StockThresholds:
    """Cut points for the stock tiers.

    stock > high is HIGH, stock > medium is MEDIUM, anything else is LOW.

    Attributes:
        medium: Upper bound (inclusive) of the LOW tier
        high: Upper bound (inclusive) of the MEDIUM tier
    """

    medium: int
    high: int

    def __post_init__(self) -> None:
        if self.medium > self.high:
            raise ValueError(
                f"medium threshold ({self.medium}) must not exceed high threshold ({self.high})"
            )

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> "StockThresholds":
        medium, high = pair
        return cls(medium=medium, high=high)


def stock_status(stock: Any, thresholds: StockThresholds) -> StockTier:
    """Classify a stock quantity. Unreadable stock counts as LOW."""
    quantity = to_number(stock)
    if quantity is None:
        return StockTier.LOW
    if quantity > thresholds.high:
        return StockTier.HIGH
    if quantity > thresholds.medium:
        return StockTier.MEDIUM
    return StockTier.LOW


def line_value(record: Mapping[str, Any]) -> Decimal | None:
    """price * stock for one record, or None when either is unreadable."""
    price = to_number(record.get("price"))
    stock = to_number(record.get("stock"))
    if price is None or stock is None:
        return None
    try:
        return price * stock
    except ArithmeticError:
        # Product falls outside the Decimal exponent range
        return None


def inventory_value(records: Iterable[Mapping[str, Any]]) -> Decimal:
    """Sum of price * stock over records, skipping malformed ones."""
    total = Decimal(0)
    for record in records:
        value = line_value(record)
        if value is None:
            continue
        try:
            total += value
        except ArithmeticError:
            continue
    return total


def category_label(category_id: Any) -> str:
    """Rendered category label, e.g. 5 -> "KAT-5"."""
    return f"KAT-{'' if category_id is None else category_id}"


def display_text(value: Any) -> str:
    """String form of a record value, None becoming empty."""
    return "" if value is None else str(value)
