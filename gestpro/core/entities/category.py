"""Product category domain entity."""

from datetime import datetime

from pydantic import BaseModel, Field

from gestpro.core.entities.common import utc_now


class Category(BaseModel):
    """Optional grouping for products."""

    id: int | None = None
    user_id: str
    name: str
    description: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
