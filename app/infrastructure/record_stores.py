"""Record Stores: SQLAlchemy implementations of EventStore and BookingStore.

Invariants:
    - Each call runs in its own session/transaction; nothing is cached between calls
    - Stores never validate: they persist what the core already normalized
    - created_at is set on first insert only; updated_at is set on every accepted write
    - Slug unique-index violations become DuplicateSlugError, booking FK violations
      become DanglingReferenceError; every other DB failure is StoreUnavailableError

Design Decisions:
    - Timestamps are attached to UTC when the backend hands them back naive (SQLite)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.domain_types import BookingId, EventId, ReferenceKind
from app.core.errors import DanglingReferenceError, DuplicateSlugError
from app.core.records import BookingRecord, EventRecord
from app.infrastructure.database import DatabaseSessionManager
from app.models import Booking, Event

logger = logging.getLogger(__name__)

_EVENT_COLUMNS = (
    "title", "description", "overview", "image", "venue", "location",
    "date", "time", "mode", "audience", "organizer", "slug",
)


def as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _event_record(row: Event) -> EventRecord:
    return EventRecord(
        id=EventId(row.id),
        agenda=list(row.agenda),
        tags=list(row.tags),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        **{name: getattr(row, name) for name in _EVENT_COLUMNS},
    )


def _booking_record(row: Booking) -> BookingRecord:
    return BookingRecord(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        email=row.email,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlEventStore:
    """EventStore backed by the events table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def get(self, event_id: EventId) -> EventRecord | None:
        async with self._db.session() as db:
            row = await db.get(Event, event_id)
            return _event_record(row) if row is not None else None

    async def exists(self, event_id: EventId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                select(Event.id).where(Event.id == event_id).limit(1),
            )
            return result.scalar_one_or_none() is not None

    async def find_by_slug(self, slug: str) -> EventRecord | None:
        async with self._db.session() as db:
            result = await db.execute(select(Event).where(Event.slug == slug))
            row = result.scalar_one_or_none()
            return _event_record(row) if row is not None else None

    async def upsert(self, record: EventRecord) -> EventRecord:
        """Insert a new event or overwrite the stored one with the same id."""
        now = datetime.now(timezone.utc)
        async with self._db.session() as db:
            row = await db.get(Event, record.id)
            if row is None:
                row = Event(id=record.id, created_at=now)
                db.add(row)
            for name in _EVENT_COLUMNS:
                setattr(row, name, getattr(record, name))
            row.agenda = list(record.agenda)
            row.tags = list(record.tags)
            row.updated_at = now
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                if "slug" not in str(e.orig).lower():
                    raise
                logger.warning(
                    f"Slug collision on '{record.slug}'",
                    extra={"slug": record.slug, "error_code": "DUPLICATE_SLUG"},
                )
                raise DuplicateSlugError(record.slug) from e
            return _event_record(row)


class SqlBookingStore:
    """BookingStore backed by the bookings table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, record: BookingRecord) -> BookingRecord:
        now = datetime.now(timezone.utc)
        async with self._db.session() as db:
            row = Booking(
                id=record.id,
                event_id=record.event_id,
                email=record.email,
                created_at=now,
                updated_at=now,
            )
            db.add(row)
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                # FK enforcement depends on the backend (PostgreSQL yes, SQLite only with PRAGMA)
                if "foreign key" not in str(e.orig).lower():
                    raise
                raise DanglingReferenceError(
                    ReferenceKind.EVENT.value, str(record.event_id),
                ) from e
            return _booking_record(row)

    async def list_by_event(self, event_id: EventId) -> list[BookingRecord]:
        """Bookings for one event, oldest first."""
        async with self._db.session() as db:
            result = await db.execute(
                select(Booking)
                .where(Booking.event_id == event_id)
                .order_by(Booking.created_at, Booking.id),
            )
            return [_booking_record(row) for row in result.scalars()]
