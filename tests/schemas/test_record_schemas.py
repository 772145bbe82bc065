"""Record schemas: permissive input and camelCase persistence representation.

Invariants:
    - EventInput never rejects missing fields (the core reports them)
    - EventOut / BookingOut dump with the documented JSON field names
"""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from app.core.domain_types import BookingId, EventId
from app.core.enforce_event import prepare_event
from app.core.records import BookingRecord
from app.schemas.booking import BookingInput, BookingOut
from app.schemas.event import EventInput, EventOut

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_event_input_accepts_empty_payload():
    data = EventInput()
    assert data.model_dump(exclude_unset=True) == {}


def test_event_input_tracks_only_set_fields():
    data = EventInput(title="X", agenda=["a"])
    assert data.model_dump(exclude_unset=True) == {"title": "X", "agenda": ["a"]}


def test_event_out_uses_persistence_field_names(event_attrs):
    record = prepare_event(event_attrs, EventId(uuid4()))
    stored = replace(record, created_at=NOW, updated_at=NOW)
    doc = EventOut.model_validate(stored).model_dump(by_alias=True)
    assert set(doc) == {
        "id", "title", "description", "overview", "image", "venue", "location",
        "date", "time", "mode", "audience", "agenda", "organizer", "tags", "slug",
        "createdAt", "updatedAt",
    }
    assert doc["slug"] == "react-summit-2025"


def test_booking_input_accepts_camel_case():
    event_id = uuid4()
    data = BookingInput.model_validate({"eventId": str(event_id), "email": "a@b.co"})
    assert data.event_id == event_id


def test_booking_out_uses_persistence_field_names():
    record = BookingRecord(
        id=BookingId(uuid4()), event_id=EventId(uuid4()), email="a@b.co",
        created_at=NOW, updated_at=NOW,
    )
    doc = BookingOut.model_validate(record).model_dump(by_alias=True)
    assert set(doc) == {"id", "eventId", "email", "createdAt", "updatedAt"}
