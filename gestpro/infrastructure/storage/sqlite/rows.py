"""Row conversion helpers shared by the SQLite stores."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from gestpro.core.entities.client import Client
from gestpro.core.entities.common import utc_now
from gestpro.core.entities.invoice import Invoice, InvoiceItem, InvoiceStatus
from gestpro.core.entities.product import Product


def parse_datetime(value: str | None) -> datetime:
    """Parse an ISO timestamp column, falling back to now."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return utc_now()


def parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except (ValueError, TypeError):
        return None


def to_db_value(value: Any) -> Any:
    """Convert entity field values to SQLite-storable values."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def build_set_clause(
    changes: dict[str, Any], allowed: Iterable[str]
) -> tuple[str, list[Any]]:
    """
    Build ``col = ?, ...`` for the permitted columns in ``changes``.

    Raises:
        ValueError: a key is not an updatable column
    """
    allowed = set(allowed)
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Non-updatable fields: {', '.join(sorted(unknown))}")

    columns = sorted(changes)
    clause = ", ".join(f"{col} = ?" for col in columns)
    return clause, [to_db_value(changes[col]) for col in columns]


def row_to_client(row: Any) -> Client:
    """Convert a clients row to a Client entity."""
    return Client(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        address=row["address"],
        company=row["company"],
        created_at=parse_datetime(row["created_at"]),
    )


def row_to_product(row: Any) -> Product:
    """Convert a products row to a Product entity."""
    return Product(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        description=row["description"],
        price_ht=Decimal(row["price_ht"]),
        stock=int(row["stock"] or 0),
        category_id=row["category_id"],
        created_at=parse_datetime(row["created_at"]),
    )


def row_to_invoice(
    row: Any,
    items: list[InvoiceItem] | None = None,
    client: Client | None = None,
) -> Invoice:
    """Convert an invoices row to an Invoice entity."""
    return Invoice(
        id=row["id"],
        user_id=row["user_id"],
        number=row["number"],
        client_id=row["client_id"],
        status=InvoiceStatus(row["status"]),
        total_ht=Decimal(row["total_ht"]),
        tva_rate=Decimal(row["tva_rate"]),
        total_tva=Decimal(row["total_tva"]),
        total_ttc=Decimal(row["total_ttc"]),
        due_date=parse_date(row["due_date"]),
        notes=row["notes"],
        items=items or [],
        client=client,
        created_at=parse_datetime(row["created_at"]),
    )
