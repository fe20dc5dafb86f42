"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Update requests are explicit patches: each enumerates exactly the fields
that may change, unknown fields are rejected, and only fields present in
the body are applied.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

from gestpro.core.entities.common import MAX_PRICE, MAX_QUANTITY


class PatchRequest(BaseModel):
    """Base for partial updates."""

    model_config = ConfigDict(extra="forbid")

    # Fields that may be omitted but never set to null
    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self) -> "PatchRequest":
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields explicitly present in the request body."""
        return self.model_dump(exclude_unset=True)


# --- Clients ---


class CreateClientRequest(BaseModel):
    """Request to create a client."""

    name: str = Field(..., min_length=1, description="Client name")
    email: str | None = Field(default=None, description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")
    address: str | None = Field(default=None, description="Postal address")
    company: str | None = Field(default=None, description="Company name")


class UpdateClientRequest(PatchRequest):
    """Patch for a client."""

    non_nullable: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    company: str | None = None


# --- Categories ---


class CreateCategoryRequest(BaseModel):
    """Request to create a product category."""

    name: str = Field(..., min_length=1, description="Category name")
    description: str | None = Field(default=None, description="Category description")


class UpdateCategoryRequest(PatchRequest):
    """Patch for a category."""

    non_nullable: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


# --- Products ---


class CreateProductRequest(BaseModel):
    """Request to create a catalog product."""

    name: str = Field(..., min_length=1, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price_ht: Decimal = Field(..., ge=0, le=MAX_PRICE, description="Tax-exclusive unit price")
    stock: int = Field(default=0, ge=0, le=MAX_QUANTITY, description="Units in stock")
    category_id: int | None = Field(default=None, description="Category ID")


class UpdateProductRequest(PatchRequest):
    """Patch for a product. ``category_id: null`` detaches the category."""

    non_nullable: ClassVar[tuple[str, ...]] = ("name", "price_ht", "stock")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price_ht: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)
    stock: int | None = Field(default=None, ge=0, le=MAX_QUANTITY)
    category_id: int | None = None


# --- Invoices ---


class CatalogItemRequest(BaseModel):
    """Invoice line sold from the catalog.

    Name and price are snapshotted from the product when omitted.
    """

    kind: Literal["catalog"] = "catalog"
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Units sold")
    price_ht: Decimal | None = Field(
        default=None,
        ge=0,
        le=MAX_PRICE,
        description="Unit price override (defaults to product price)",
    )
    product_name: str | None = Field(
        default=None, description="Name override (defaults to product name)"
    )


class AdHocItemRequest(BaseModel):
    """Free-form invoice line with no product behind it."""

    kind: Literal["ad_hoc"] = "ad_hoc"
    product_name: str = Field(..., min_length=1, description="Line description")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Units")
    price_ht: Decimal = Field(..., ge=0, le=MAX_PRICE, description="Tax-exclusive unit price")


def _item_kind(value: Any) -> str:
    """Pick the line variant: explicit ``kind``, else by product reference."""
    if isinstance(value, dict):
        if value.get("kind"):
            return value["kind"]
        return "catalog" if value.get("product_id") is not None else "ad_hoc"
    return getattr(value, "kind", "ad_hoc")


InvoiceItemRequest = Annotated[
    Annotated[CatalogItemRequest, Tag("catalog")]
    | Annotated[AdHocItemRequest, Tag("ad_hoc")],
    Discriminator(_item_kind),
]


class CreateInvoiceRequest(BaseModel):
    """Request to create an invoice with its line items."""

    number: str = Field(..., min_length=1, description="Caller-assigned invoice number")
    client_id: int = Field(..., description="Client ID")
    tva_rate: Decimal = Field(
        ..., description="TVA percentage (3, 5, 10, 15, 18 or 21)", examples=[18]
    )
    due_date: date | None = Field(default=None, description="Payment due date")
    notes: str | None = Field(default=None, description="Free-text notes")
    items: list[InvoiceItemRequest] = Field(..., description="Line items")


class UpdateInvoiceRequest(PatchRequest):
    """Patch for an invoice header.

    ``status`` is validated by the use case so an unknown value is reported
    as a field error before anything is written.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ("number", "status")

    status: str | None = Field(
        default=None,
        description="pending, paid or partially-settled",
        examples=["paid"],
    )
    number: str | None = Field(default=None, min_length=1)
    due_date: date | None = None
    notes: str | None = None
