"""Async Session Factory - binds AsyncSession factories to an engine.

Invariants:
    - expire_on_commit=False for every factory (no lazy loads after commit in async code)

Design Decisions:
    - Shared by DatabaseSessionManager and the test fixtures, so both build
      sessions identically against their own engines
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def bind_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for an existing engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
