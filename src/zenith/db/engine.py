"""Database engine and the per-request session dependency.

Learn: One async engine per process, built from ZENITH_DATABASE_URL
(PostgreSQL through asyncpg in production). Account, task and catalog
services never open sessions themselves; they receive the one get_db
yields, so a request's reads and its commit share a transaction scope.
Tests swap get_db out for a session bound to in-memory SQLite.

expire_on_commit is off so a freshly registered User can still be
serialized after AccountService.register commits.
"""

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from zenith.config import settings

# SQL echo follows ZENITH_DEBUG
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_size=5,
    max_overflow=15,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """One session per request, closed when the response is done."""
    async with async_session_factory() as session:
        yield session
