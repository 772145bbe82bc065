"""Event Enforcement: validation and derivation for the event write path.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Presence checks run before any derivation, so MissingFieldError wins over format errors
    - Slug is recomputed only when the title changed or no slug is set
    - Returned EventRecord is fully normalized; a store may persist it as-is
"""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from app.core.domain_types import EventId, REQUIRED_EVENT_FIELDS, REQUIRED_EVENT_LISTS
from app.core.errors import MissingFieldError
from app.core.normalize import generate_slug, normalize_date, normalize_time
from app.core.records import EventRecord

_EVENT_ATTRS = frozenset(REQUIRED_EVENT_FIELDS + REQUIRED_EVENT_LISTS + ("slug",))


def merge_event_attrs(
    attrs: Mapping[str, Any], existing: EventRecord | None,
) -> dict[str, Any]:
    """Overlay incoming attributes on the stored event (partial update)."""
    merged: dict[str, Any] = {}
    if existing is not None:
        merged = {k: v for k, v in asdict(existing).items() if k in _EVENT_ATTRS}
    merged.update({k: v for k, v in attrs.items() if k in _EVENT_ATTRS})
    return merged


def check_required_fields(attrs: Mapping[str, Any]) -> dict[str, str]:
    """Return the required strings trimmed, or raise on the first missing one."""
    cleaned: dict[str, str] = {}
    for name in REQUIRED_EVENT_FIELDS:
        value = attrs.get(name)
        if not isinstance(value, str) or not value.strip():
            raise MissingFieldError(name)
        cleaned[name] = value.strip()
    for name in REQUIRED_EVENT_LISTS:
        value = attrs.get(name)
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise MissingFieldError(name)
    return cleaned


def title_modified(title: str, existing: EventRecord | None) -> bool:
    """A new event always counts as a title change."""
    return existing is None or existing.title != title


def resolve_slug(title: str, slug: str | None, existing: EventRecord | None) -> str:
    if title_modified(title, existing) or not (slug or "").strip():
        derived = generate_slug(title)
    else:
        derived = generate_slug(slug)
    if not derived:
        raise MissingFieldError("slug")
    return derived


def prepare_event(
    attrs: Mapping[str, Any],
    event_id: EventId,
    existing: EventRecord | None = None,
) -> EventRecord:
    """Run the full event pipeline and return the record to upsert.

    Args:
        attrs: incoming attributes keyed by field name; on update only the
            changed ones need to be present.
        event_id: id for a new event, or the stored event's id.
        existing: stored event when this is an update, else None.

    Raises:
        MissingFieldError, InvalidDateError, InvalidTimeError
    """
    merged = merge_event_attrs(attrs, existing)
    fields = check_required_fields(merged)
    slug = resolve_slug(fields["title"], merged.get("slug"), existing)
    fields["date"] = normalize_date(fields["date"])
    fields["time"] = normalize_time(fields["time"])
    return EventRecord(
        id=event_id,
        slug=slug,
        agenda=list(merged["agenda"]),
        tags=list(merged["tags"]),
        created_at=existing.created_at if existing is not None else None,
        **fields,
    )
