"""Tests for invoice status parsing and the settlement guard."""

import pytest

from gestpro.core.entities import InvoiceStatus
from gestpro.core.exceptions import ValidationError
from gestpro.core.services import parse_status, triggers_settlement


class TestParseStatus:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("pending", InvoiceStatus.PENDING),
            ("paid", InvoiceStatus.PAID),
            ("partially-settled", InvoiceStatus.PARTIALLY_SETTLED),
        ],
    )
    def test_known_values(self, raw, expected):
        assert parse_status(raw) is expected

    def test_enum_passthrough(self):
        assert parse_status(InvoiceStatus.PAID) is InvoiceStatus.PAID

    @pytest.mark.parametrize("raw", ["payee", "PAID", "cancelled", ""])
    def test_unknown_values_rejected(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_status(raw)
        assert exc_info.value.details["field"] == "status"


class TestTriggersSettlement:
    @pytest.mark.parametrize(
        "previous",
        [InvoiceStatus.PENDING, InvoiceStatus.PARTIALLY_SETTLED, None],
    )
    def test_move_into_paid(self, previous):
        assert triggers_settlement(previous, InvoiceStatus.PAID) is True

    def test_paid_to_paid(self):
        assert triggers_settlement(InvoiceStatus.PAID, InvoiceStatus.PAID) is False

    @pytest.mark.parametrize(
        "requested",
        [InvoiceStatus.PENDING, InvoiceStatus.PARTIALLY_SETTLED],
    )
    def test_leaving_paid_does_not_settle(self, requested):
        assert triggers_settlement(InvoiceStatus.PAID, requested) is False

    def test_pending_to_partial(self):
        assert (
            triggers_settlement(InvoiceStatus.PENDING, InvoiceStatus.PARTIALLY_SETTLED)
            is False
        )
