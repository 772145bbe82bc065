"""ORM Models: SQLAlchemy declarative models for events and bookings.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event owns its bookings; bookings reference events by event_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.event import Event  # noqa: F401
from app.models.booking import Booking  # noqa: F401
