"""Process Lifecycle: startup and shutdown of the process-wide store handle.

Invariants:
    - Logging is configured before the database handle is created
    - Leaving lifespan() always disposes the engine, even on error
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager, close_db, init_db
from app.infrastructure.observability import setup_logging
from app.infrastructure.record_stores import SqlBookingStore, SqlEventStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
) -> AsyncIterator[DatabaseSessionManager]:
    """Startup/shutdown lifecycle. Yields the initialized session manager."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("eventbook started")
    try:
        yield manager
    finally:
        await close_db()
        logger.info("eventbook shutting down")


def build_stores(
    manager: DatabaseSessionManager,
) -> tuple[SqlEventStore, SqlBookingStore]:
    return SqlEventStore(manager), SqlBookingStore(manager)
