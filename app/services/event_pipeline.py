"""Event Pipeline: validate, normalize and persist an event.

Invariants:
    - Validation runs before any write; a rejected event never reaches the store
    - An update loads the stored event first so slug regeneration sees the old title
    - DuplicateSlugError comes from the store's unique index, never from a pre-check

Design Decisions:
    - Explicit function the caller invokes instead of a save hook on the model:
      the store write primitives stay free of validation
"""

import logging
import uuid
from typing import Callable

from app.core.domain_types import EventId
from app.core.enforce_event import prepare_event
from app.core.errors import EventBookError, ResourceNotFoundError
from app.core.records import EventRecord
from app.core.repository_protocols import EventStore
from app.schemas.event import EventInput

logger = logging.getLogger(__name__)


async def save_event(
    store: EventStore,
    data: EventInput,
    event_id: EventId | None = None,
    new_id: Callable[[], uuid.UUID] = uuid.uuid4,
) -> EventRecord:
    """Create an event, or update the one with event_id using only the fields set on data.

    Raises:
        MissingFieldError, InvalidDateError, InvalidTimeError: candidate rejected
        ResourceNotFoundError: event_id given but not stored
        DuplicateSlugError: another event owns the derived slug
        StoreUnavailableError: the store failed
    """
    existing = None
    target_id = event_id if event_id is not None else EventId(new_id())
    try:
        if event_id is not None:
            existing = await store.get(event_id)
            if existing is None:
                raise ResourceNotFoundError("Event", str(event_id))
        record = prepare_event(
            data.model_dump(exclude_unset=True), target_id, existing,
        )
        saved = await store.upsert(record)
    except EventBookError as e:
        logger.warning(
            f"Event rejected: {e.message}",
            extra={"event_id": target_id, "error_code": e.code},
        )
        raise

    logger.info(
        "Event created" if existing is None else "Event updated",
        extra={"event_id": saved.id, "slug": saved.slug},
    )
    return saved
