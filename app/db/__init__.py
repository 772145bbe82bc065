"""Database Infrastructure: SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process (created via infrastructure.database.init_db)
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
