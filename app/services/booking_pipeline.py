"""Booking Pipeline: confirm the event exists, validate the email, persist.

Invariants:
    - The event existence check is the only await before validation completes
    - A failing existence check is StoreUnavailableError, never DanglingReferenceError
    - Check-then-insert is best-effort: an event removed between the two steps is
      only caught where the backend enforces the bookings.event_id foreign key
"""

import logging
import uuid
from typing import Callable

from app.core.domain_types import BookingId, EventId
from app.core.enforce_booking import check_booking_fields, prepare_booking
from app.core.errors import EventBookError, StoreUnavailableError
from app.core.records import BookingRecord
from app.core.repository_protocols import BookingStore, EventStore
from app.schemas.booking import BookingInput

logger = logging.getLogger(__name__)


async def event_exists(events: EventStore, event_id: EventId) -> bool:
    """Ask the event store; any failure other than a typed one is StoreUnavailableError."""
    try:
        return await events.exists(event_id)
    except EventBookError:
        raise
    except Exception as e:
        logger.error(
            f"Event existence check failed: {e}",
            extra={"event_id": event_id, "operation": "exists"},
        )
        raise StoreUnavailableError(str(e) or type(e).__name__, "exists") from e


async def save_booking(
    events: EventStore,
    bookings: BookingStore,
    data: BookingInput,
    new_id: Callable[[], uuid.UUID] = uuid.uuid4,
) -> BookingRecord:
    """Create a booking for an existing event.

    Raises:
        MissingFieldError: eventId or email absent
        DanglingReferenceError: the event does not exist
        InvalidEmailError: email does not match the accepted pattern
        StoreUnavailableError: the existence check or the insert failed
    """
    attrs = data.model_dump()
    booking_id = BookingId(new_id())
    try:
        check_booking_fields(attrs)
        exists = await event_exists(events, EventId(attrs["event_id"]))
        record = prepare_booking(attrs, booking_id, exists)
        saved = await bookings.insert(record)
    except EventBookError as e:
        logger.warning(
            f"Booking rejected: {e.message}",
            extra={
                "booking_id": booking_id,
                "event_id": attrs.get("event_id"),
                "error_code": e.code,
            },
        )
        raise

    logger.info(
        "Booking created",
        extra={"booking_id": saved.id, "event_id": saved.event_id},
    )
    return saved
