"""Root conftest: shared test configuration and candidate records."""

import os

import pytest

# Ensure tests never reach a real database by accident
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)


@pytest.fixture
def event_attrs() -> dict:
    """A complete, valid event candidate in raw (un-normalized) form."""
    return {
        "title": "React Summit 2025",
        "description": "The biggest React conference worldwide.",
        "overview": "Two days of talks, workshops and networking.",
        "image": "/images/event1.png",
        "venue": "Taets Art & Event Park",
        "location": "Amsterdam, Netherlands",
        "date": "2025/06/13",
        "time": " 09:00 ",
        "mode": "hybrid",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "Workshops", "Closing panel"],
        "organizer": "GitNation",
        "tags": ["react", "frontend"],
    }
