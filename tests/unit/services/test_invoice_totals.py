"""Tests for invoice total computation."""

from dataclasses import dataclass
from decimal import Decimal

import pytest

from gestpro.core.entities import MAX_PRICE, MAX_QUANTITY, AdHocItem
from gestpro.core.exceptions import ValidationError
from gestpro.core.services import (
    compute_invoice_totals,
    compute_line_total,
    normalize_tax_rate,
)


@dataclass
class Line:
    quantity: int
    price_ht: Decimal


class TestComputeInvoiceTotals:
    def test_two_lines_at_18_percent(self):
        lines = [Line(3, Decimal("1000")), Line(1, Decimal("500"))]

        totals = compute_invoice_totals(lines, 18)

        assert totals.line_totals == (Decimal("3000.00"), Decimal("500.00"))
        assert totals.total_ht == Decimal("3500.00")
        assert totals.tva_rate == Decimal("18.00")
        assert totals.total_tva == Decimal("630.00")
        assert totals.total_ttc == Decimal("4130.00")

    def test_ttc_is_ht_plus_tva(self):
        lines = [Line(7, Decimal("3.33")), Line(2, Decimal("0.99"))]

        totals = compute_invoice_totals(lines, "21")

        assert totals.total_ht == Decimal("25.29")
        assert totals.total_tva == Decimal("5.31")
        assert totals.total_ttc == totals.total_ht + totals.total_tva

    def test_line_totals_rounded_before_sum(self):
        lines = [Line(1, Decimal("0.005")), Line(1, Decimal("0.005"))]

        totals = compute_invoice_totals(lines, 10)

        assert totals.line_totals == (Decimal("0.01"), Decimal("0.01"))
        assert totals.total_ht == Decimal("0.02")

    def test_empty_lines_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([], 18)
        assert exc_info.value.details["field"] == "items"

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([Line(0, Decimal("10"))], 18)
        assert exc_info.value.details["field"] == "quantity"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([Line(1, Decimal("-1"))], 18)
        assert exc_info.value.details["field"] == "price_ht"

    def test_unknown_rate_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([Line(1, Decimal("10"))], 7)
        assert exc_info.value.details["field"] == "tva_rate"

    def test_zero_price_allowed(self):
        totals = compute_invoice_totals([Line(2, Decimal("0"))], 5)
        assert totals.total_ttc == Decimal("0.00")

    def test_oversized_quantity_rejected(self):
        line = AdHocItem(product_name="x", quantity=10**27, price_ht=Decimal("1000.00"))

        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([line], 18)
        assert exc_info.value.details["field"] == "quantity"

    def test_total_beyond_decimal_precision_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([Line(MAX_QUANTITY, MAX_PRICE)], 18)
        assert exc_info.value.details["field"] == "price_ht"

    def test_many_large_lines_rejected(self):
        # Each line fits, the sum does not
        lines = [Line(10**13, Decimal("999999999999.99"))] * 20

        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals(lines, 21)
        assert exc_info.value.details["field"] == "items"


class TestComputeLineTotal:
    def test_basic(self):
        assert compute_line_total(4, Decimal("2.50")) == Decimal("10.00")

    def test_bool_quantity_rejected(self):
        with pytest.raises(ValidationError):
            compute_line_total(True, Decimal("1"))

    @pytest.mark.parametrize("price", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError):
            compute_line_total(1, price)


class TestNormalizeTaxRate:
    @pytest.mark.parametrize("rate", [3, 5, 10, 15, 18, 21])
    def test_allowed_rates(self, rate):
        assert normalize_tax_rate(rate) == Decimal(rate).quantize(Decimal("0.01"))

    def test_accepts_decimal_string(self):
        assert normalize_tax_rate("18.00") == Decimal("18.00")

    @pytest.mark.parametrize("rate", [0, 7, 20, "18.5", -5])
    def test_rejected_rates(self, rate):
        with pytest.raises(ValidationError):
            normalize_tax_rate(rate)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_tax_rate("abc")
        assert "number" in exc_info.value.message

    @pytest.mark.parametrize("rate", [Decimal("sNaN"), Decimal("NaN"), "Infinity"])
    def test_non_finite_rejected(self, rate):
        with pytest.raises(ValidationError):
            normalize_tax_rate(rate)
