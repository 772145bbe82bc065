"""Services: async pipelines that wrap the pure core around store calls."""

from app.services.event_pipeline import save_event
from app.services.booking_pipeline import save_booking

__all__ = ["save_event", "save_booking"]
