"""Event Schemas: Pydantic models for event input and output at the caller boundary.

Invariants:
    - EventInput is permissive: every field optional, so presence rules are
      enforced (and reported as MissingFieldError) by the core, not by Pydantic
    - JSON field names are camelCase (createdAt, updatedAt); Python names are snake_case
    - EventOut.model_dump(by_alias=True) is the persistence representation
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventInput(BaseModel):
    """Raw event attributes supplied by a caller (create or partial update)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    overview: str | None = None
    image: str | None = None
    venue: str | None = None
    location: str | None = None
    date: str | None = None
    time: str | None = None
    mode: str | None = None
    audience: str | None = None
    agenda: list[str] | None = None
    organizer: str | None = None
    tags: list[str] | None = None
    slug: str | None = None


class EventOut(BaseModel):
    """A persisted event."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    slug: str
    created_at: datetime
    updated_at: datetime
