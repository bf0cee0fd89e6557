"""Database session dependency."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from bureau.infrastructure.database import get_session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: committed on success, rolled back on any exception.

    Routes that persist state before answering with an error (failed logins)
    commit explicitly before raising.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


__all__ = ["get_db_session"]
