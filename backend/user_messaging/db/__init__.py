"""Database Infrastructure — SQLAlchemy Base and standalone session factory.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver: SQLite file store without blocking the event loop
"""
