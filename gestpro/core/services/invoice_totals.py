"""
Invoice total calculator.

Pure functions: no storage, no logging. Each line total is rounded to
2 places before summation so totals never drift across lines.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Protocol

from gestpro.core.entities.common import MAX_QUANTITY, to_money
from gestpro.core.entities.invoice import TAX_RATES
from gestpro.core.exceptions import ValidationError


class PricedLine(Protocol):
    """Anything with a quantity and a tax-exclusive unit price."""

    quantity: int
    price_ht: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    """Computed invoice amounts."""

    line_totals: tuple[Decimal, ...]
    total_ht: Decimal
    tva_rate: Decimal
    total_tva: Decimal
    total_ttc: Decimal


def normalize_tax_rate(rate: Decimal | int | float | str) -> Decimal:
    """Return the rate as a 2-place Decimal, or raise if it is not allowed."""
    try:
        value = Decimal(str(rate))
    except (InvalidOperation, ValueError):
        raise ValidationError("tva_rate", "must be a number", rate)

    allowed = ", ".join(str(r) for r in TAX_RATES)
    # NaN and infinities cannot be hashed or compared
    if not value.is_finite() or value not in {Decimal(r) for r in TAX_RATES}:
        raise ValidationError("tva_rate", f"must be one of {allowed}", rate)
    return to_money(value)


def compute_line_total(quantity: int, price_ht: Decimal) -> Decimal:
    """quantity x unit price, rounded to 2 places."""
    if (
        isinstance(quantity, bool)
        or not isinstance(quantity, int)
        or not 1 <= quantity <= MAX_QUANTITY
    ):
        raise ValidationError(
            "quantity", f"must be an integer between 1 and {MAX_QUANTITY}", quantity
        )
    try:
        price = Decimal(str(price_ht))
    except (InvalidOperation, ValueError):
        raise ValidationError("price_ht", "must be a number", price_ht)
    if not price.is_finite() or price < 0:
        raise ValidationError("price_ht", "must be a finite amount >= 0", price_ht)
    try:
        return to_money(price * quantity)
    except InvalidOperation:
        raise ValidationError("price_ht", "line total is too large", price_ht)


def compute_invoice_totals(
    lines: Sequence[PricedLine],
    tva_rate: Decimal | int | float | str,
) -> InvoiceTotals:
    """
    Compute HT, TVA and TTC totals for a list of lines.

    Args:
        lines: Ordered line items (quantity >= 1, price >= 0)
        tva_rate: Percentage, one of TAX_RATES

    Returns:
        InvoiceTotals with per-line totals in input order

    Raises:
        ValidationError: empty list, bad quantity, negative price, unknown
            rate, or a total too large to represent
    """
    if not lines:
        raise ValidationError("items", "invoice must have at least one item")

    rate = normalize_tax_rate(tva_rate)
    line_totals = tuple(compute_line_total(l.quantity, l.price_ht) for l in lines)

    try:
        total_ht = to_money(sum(line_totals, Decimal("0")))
        total_tva = to_money(total_ht * rate / Decimal(100))
        total_ttc = to_money(total_ht + total_tva)
    except InvalidOperation:
        raise ValidationError("items", "invoice total is too large")

    return InvoiceTotals(
        line_totals=line_totals,
        total_ht=total_ht,
        tva_rate=rate,
        total_tva=total_tva,
        total_ttc=total_ttc,
    )
