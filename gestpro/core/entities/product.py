"""Product domain entities."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from gestpro.core.entities.common import to_money, utc_now


class Product(BaseModel):
    """A catalog product with a tax-exclusive unit price and a stock level."""

    id: int | None = None
    user_id: str
    name: str
    description: str | None = None
    price_ht: Decimal
    stock: int = Field(default=0, ge=0)
    category_id: int | None = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("price_ht", mode="after")
    @classmethod
    def quantize_price(cls, v: Decimal) -> Decimal:
        return to_money(v)


@dataclass(frozen=True)
class StockDecrement:
    """Quantity to remove from one product's stock."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class StockAdjustment:
    """Outcome of one stock decrement.

    ``applied`` is False when the product no longer exists for the tenant;
    ``stock_after`` is then None.
    """

    product_id: int
    quantity: int
    applied: bool
    stock_after: int | None = None
