"""Booking Schemas: Pydantic models for booking input and output.

Invariants:
    - BookingInput leaves email unchecked; the core lowercases, trims and pattern-checks it
    - JSON field names: eventId, email, createdAt, updatedAt
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BookingInput(BaseModel):
    """Raw booking attributes supplied by a caller."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    event_id: UUID | None = None
    email: str | None = None


class BookingOut(BaseModel):
    """A persisted booking."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    event_id: UUID
    email: str
    created_at: datetime
    updated_at: datetime
