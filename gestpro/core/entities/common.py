"""Shared helpers for monetary values and timestamps."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

TWOPLACES = Decimal("0.01")

# SQLite INTEGER is a signed 64-bit value
MAX_QUANTITY = 2**63 - 1
MAX_PRICE = Decimal("999999999999.99")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Quantize a value to 2 decimal places, rounding half up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
