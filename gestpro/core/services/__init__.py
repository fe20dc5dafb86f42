"""
Core business logic services.

Layer-pure services that depend only on:
- gestpro/core/entities/*
- gestpro/core/exceptions.py

NO infrastructure imports.
"""

from gestpro.core.services.invoice_totals import (
    InvoiceTotals,
    compute_invoice_totals,
    compute_line_total,
    normalize_tax_rate,
)
from gestpro.core.services.status_transition import parse_status, triggers_settlement

__all__ = [
    # Totals
    "InvoiceTotals",
    "compute_invoice_totals",
    "compute_line_total",
    "normalize_tax_rate",
    # Status
    "parse_status",
    "triggers_settlement",
]
