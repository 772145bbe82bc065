"""Domain Types: verifies identity types, enums, field sets and patterns.

Tests:
    - NewType wrappers exist and are callable
    - Required field order matches the order errors are reported in
    - Patterns accept and reject the documented shapes
"""

from uuid import uuid4

from app.core.domain_types import (
    BookingId, EventId, EventMode, ReferenceKind,
    EMAIL_PATTERN, TIME_PATTERN,
    REQUIRED_BOOKING_FIELDS, REQUIRED_EVENT_FIELDS, REQUIRED_EVENT_LISTS,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert EventId(uid) == uid
    assert BookingId(uid) == uid


def test_event_mode_known_values():
    assert {m.value for m in EventMode} == {"online", "offline", "hybrid"}


def test_reference_kind_event():
    assert ReferenceKind.EVENT.value == "event"


def test_required_event_fields_order():
    assert REQUIRED_EVENT_FIELDS[0] == "title"
    assert REQUIRED_EVENT_FIELDS[-1] == "organizer"
    assert len(REQUIRED_EVENT_FIELDS) == 11
    assert REQUIRED_EVENT_LISTS == ("agenda", "tags")


def test_booking_fields_report_json_names():
    assert REQUIRED_BOOKING_FIELDS == {"event_id": "eventId", "email": "email"}


def test_time_pattern_bounds():
    assert TIME_PATTERN.match("00:00")
    assert TIME_PATTERN.match("23:59")
    assert not TIME_PATTERN.match("24:00")
    assert not TIME_PATTERN.match("7:30")


def test_email_pattern():
    assert EMAIL_PATTERN.match("a@b.co")
    assert not EMAIL_PATTERN.match("a b@c.de")
