"""
Invoice domain entities.

Line items are a tagged variant: a ``CatalogItem`` points at a product and
moves stock and sales on settlement, an ``AdHocItem`` is a free-form charge
with no inventory effect.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from gestpro.core.entities.client import Client
from gestpro.core.entities.common import utc_now

# Allowed TVA percentages
TAX_RATES: tuple[int, ...] = (3, 5, 10, 15, 18, 21)


class InvoiceStatus(str, Enum):
    """Invoice lifecycle states."""

    PENDING = "pending"
    PAID = "paid"
    PARTIALLY_SETTLED = "partially-settled"


class _InvoiceLine(BaseModel):
    """Fields shared by every invoice line."""

    id: int | None = None
    invoice_id: int | None = None
    product_name: str  # snapshot taken at invoice creation
    quantity: int
    price_ht: Decimal  # unit price snapshot
    total_ht: Decimal = Decimal("0.00")  # quantity * price_ht, stored


class CatalogItem(_InvoiceLine):
    """Line sold from the product catalog."""

    kind: Literal["catalog"] = "catalog"
    product_id: int


class AdHocItem(_InvoiceLine):
    """Free-form line with no product behind it."""

    kind: Literal["ad_hoc"] = "ad_hoc"


InvoiceItem = Annotated[CatalogItem | AdHocItem, Field(discriminator="kind")]


class Invoice(BaseModel):
    """Invoice header with its line items and computed totals."""

    id: int | None = None
    user_id: str
    number: str
    client_id: int
    status: InvoiceStatus = InvoiceStatus.PENDING
    total_ht: Decimal = Decimal("0.00")
    tva_rate: Decimal
    total_tva: Decimal = Decimal("0.00")
    total_ttc: Decimal = Decimal("0.00")
    due_date: date | None = None
    notes: str | None = None
    items: list[InvoiceItem] = Field(default_factory=list)
    client: Client | None = None
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def catalog_items(self) -> list[CatalogItem]:
        """Lines that carry stock and sales effects."""
        return [item for item in self.items if isinstance(item, CatalogItem)]

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID
