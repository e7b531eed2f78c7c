"""
Restaurant Finder - Database Session Management
================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI session dependency.
How:   One pooled async engine per process; each request gets its own
       session which commits on success and rolls back on error.
Who:   Route handlers (via Depends), the storage gateway, Alembic and tests.
When:  Engine is created at module import; sessions are created per request.

Connection Pooling:
    pool_size / max_overflow:  from settings (default 10 + 10)
    pool_pre_ping:             validates connections before use
    pool_recycle=3600:         recycles connections every hour
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from restaurant_finder.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    """Pool options for the configured backend."""
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    # In-memory SQLite uses a static single-connection pool with no sizing
    if ":memory:" not in url:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned rows stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers models with a shared metadata object, which Alembic reads for
    migrations and the test suite uses to create the schema.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits whatever is still pending
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called on application shutdown."""
    await engine.dispose()
