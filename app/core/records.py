"""Records: the normalized shapes that cross the core/store boundary.

Invariants:
    - A record built by the core is already normalized (trimmed, canonical date/time, slug set)
    - created_at / updated_at are None until a store has accepted the write
    - Records are frozen; derive changed copies with dataclasses.replace
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.core.domain_types import BookingId, EventId


@dataclass(frozen=True)
class EventRecord:
    """A validated event, ready for upsert or as returned by the store."""
    id: EventId
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
    organizer: str
    slug: str
    agenda: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class BookingRecord:
    """A validated booking, ready for insert or as returned by the store."""
    id: BookingId
    event_id: EventId
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
