"""Pydantic Schemas: input and output contracts for callers of the write path.

Invariants:
    - Input schemas parse types only; business rules live in core/
    - Output schemas serialize core records (from_attributes) with camelCase aliases

Design Decisions:
    - Separate from models: schemas are caller contracts, models are persistence
"""

from app.schemas.event import EventInput, EventOut
from app.schemas.booking import BookingInput, BookingOut

__all__ = ["EventInput", "EventOut", "BookingInput", "BookingOut"]
