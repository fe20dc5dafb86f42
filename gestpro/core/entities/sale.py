"""Sales ledger entity."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from gestpro.core.entities.common import utc_now


class Sale(BaseModel):
    """
    Immutable record of a catalog line sold through a settled invoice.

    Quantity, unit price and total are copied from the invoice item at the
    moment of settlement.
    """

    id: int | None = None
    user_id: str
    invoice_id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    total: Decimal
    created_at: datetime = Field(default_factory=utc_now)
