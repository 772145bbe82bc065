"""Service test fixtures: file-backed SQLite database and SQL stores.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - Foreign keys are enforced (PRAGMA foreign_keys=ON) so SQLite behaves like PostgreSQL
    - Stores are the real SQL implementations; no store is mocked here

Design Decisions:
    - File, not :memory:: concurrent sessions need separate connections to the same database
"""

import pytest
from sqlalchemy import event

from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.record_stores import SqlBookingStore, SqlEventStore
from app.schemas.event import EventInput


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'eventbook.db'}",
        pool_size=5,
        max_overflow=5,
    )

    @event.listens_for(manager.engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def event_store(db_manager):
    return SqlEventStore(db_manager)


@pytest.fixture
def booking_store(db_manager):
    return SqlBookingStore(db_manager)


@pytest.fixture
def event_input(event_attrs):
    return EventInput(**event_attrs)
