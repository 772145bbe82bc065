"""Booking Enforcement: validation for the booking write path.

Invariants:
    - All functions are PURE: the event existence answer is gathered by the shell
      and passed in, so this module never awaits
    - Order: presence -> referenced event exists -> email pattern
"""

from collections.abc import Mapping
from typing import Any

from app.core.domain_types import BookingId, EventId, REQUIRED_BOOKING_FIELDS, ReferenceKind
from app.core.errors import DanglingReferenceError, MissingFieldError
from app.core.normalize import normalize_email
from app.core.records import BookingRecord


def check_booking_fields(attrs: Mapping[str, Any]) -> None:
    for name, reported in REQUIRED_BOOKING_FIELDS.items():
        value = attrs.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingFieldError(reported)


def prepare_booking(
    attrs: Mapping[str, Any], booking_id: BookingId, event_exists: bool,
) -> BookingRecord:
    """Validate a booking candidate once the event lookup has answered."""
    check_booking_fields(attrs)
    event_id = EventId(attrs["event_id"])
    if not event_exists:
        raise DanglingReferenceError(ReferenceKind.EVENT.value, str(event_id))
    return BookingRecord(
        id=booking_id,
        event_id=event_id,
        email=normalize_email(attrs["email"]),
    )
