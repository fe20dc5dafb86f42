"""
Invoice status transition guard.

Settlement (stock decrement + sales materialization) runs once, on the
first transition into ``paid``. Leaving ``paid`` never reverses it.
"""

from gestpro.core.entities.invoice import InvoiceStatus
from gestpro.core.exceptions import ValidationError


def parse_status(value: str | InvoiceStatus) -> InvoiceStatus:
    """Resolve a status string to the enum, rejecting anything unknown."""
    if isinstance(value, InvoiceStatus):
        return value
    try:
        return InvoiceStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in InvoiceStatus)
        raise ValidationError("status", f"must be one of {allowed}", value)


def triggers_settlement(
    previous: InvoiceStatus | None,
    requested: InvoiceStatus,
) -> bool:
    """True when moving to ``paid`` from any other state."""
    return requested == InvoiceStatus.PAID and previous != InvoiceStatus.PAID
