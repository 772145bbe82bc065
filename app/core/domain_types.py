"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - EventId, BookingId wrap UUIDs; never use bare UUID in domain logic
    - REQUIRED_EVENT_FIELDS order is the order missing fields are reported in
    - EMAIL_PATTERN is the only accepted address shape

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType
from uuid import UUID


# --- Identity Types -----------------------------------------------

EventId = NewType("EventId", UUID)
BookingId = NewType("BookingId", UUID)


# --- Enums --------------------------------------------------------

class EventMode(str, Enum):
    """Known delivery modes. The mode field also accepts other strings."""
    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"


class ReferenceKind(str, Enum):
    """Record kinds a foreign key can point at."""
    EVENT = "event"


# --- Field Sets ---------------------------------------------------

REQUIRED_EVENT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

REQUIRED_EVENT_LISTS: tuple[str, ...] = ("agenda", "tags")

# attribute name -> name reported in MissingFieldError
REQUIRED_BOOKING_FIELDS: dict[str, str] = {"event_id": "eventId", "email": "email"}


# --- Patterns -----------------------------------------------------

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
SLUG_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")
