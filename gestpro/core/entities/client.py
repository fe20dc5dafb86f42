"""Client domain entity."""

from datetime import datetime

from pydantic import BaseModel, Field

from gestpro.core.entities.common import utc_now


class Client(BaseModel):
    """A customer of the tenant. Referenced by invoices."""

    id: int | None = None
    user_id: str
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
