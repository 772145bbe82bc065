"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Stores own createdAt/updatedAt; callers never set them

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the core functions that validate records are never async themselves
"""

from typing import Protocol

from app.core.domain_types import EventId
from app.core.records import BookingRecord, EventRecord


class EventStore(Protocol):
    """Contract for event persistence, unique index on slug."""
    async def get(self, event_id: EventId) -> EventRecord | None: ...
    async def exists(self, event_id: EventId) -> bool: ...
    async def find_by_slug(self, slug: str) -> EventRecord | None: ...
    async def upsert(self, record: EventRecord) -> EventRecord:
        """Insert or replace by id. Raises DuplicateSlugError on slug collision."""
        ...


class BookingStore(Protocol):
    """Contract for booking persistence."""
    async def insert(self, record: BookingRecord) -> BookingRecord:
        """Raises StoreUnavailableError when the write fails."""
        ...

    async def list_by_event(self, event_id: EventId) -> list[BookingRecord]: ...
