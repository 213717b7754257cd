"""Test fixtures — a fresh in-memory database per test.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Required settings (signing secret, token lifetime) are put in the
   environment BEFORE anything from zenith is imported, because
   zenith.config refuses to load without them.
2. Each test gets its own in-memory SQLite engine (aiosqlite). StaticPool
   keeps a single connection so every session sees the same database.
3. The app's get_db dependency is overridden to hand out that session.

bcrypt rounds are dropped to 4 so hashing doesn't dominate the suite.
"""

import os

os.environ.setdefault("ZENITH_JWT_SECRET", "test-secret-do-not-use-in-production")
os.environ.setdefault("ZENITH_TOKEN_LIFETIME_MINUTES", "60")
os.environ.setdefault("ZENITH_BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from zenith.auth.jwt import TokenIssuer  # noqa: E402
from zenith.auth.ownership import OwnershipGuard  # noqa: E402
from zenith.db.engine import get_db  # noqa: E402
from zenith.db.models import Base  # noqa: E402
from zenith.main import app  # noqa: E402
from zenith.services.account_service import AccountService  # noqa: E402
from zenith.services.task_service import TaskService  # noqa: E402

TEST_DB_URL = "sqlite+aiosqlite://"
TEST_BCRYPT_ROUNDS = 4


@pytest_asyncio.fixture()
async def db_engine():
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(db_engine):
    """Session bound to the per-test database."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def issuer() -> TokenIssuer:
    """The same issuer the app uses, so tokens from either side verify."""
    return app.state.token_issuer


@pytest.fixture
def accounts(db_session, issuer) -> AccountService:
    return AccountService(db_session, issuer, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def task_service(db_session, accounts) -> TaskService:
    return TaskService(db_session, OwnershipGuard(accounts))


@pytest_asyncio.fixture()
async def client(db_session):
    """HTTP client with the app's get_db overridden for testing."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def registered(client):
    """Register one account through the API and return the response body."""
    r = await client.post(
        "/api/users",
        json={"email": "owner@example.com", "password": "owner_password", "name": "Owner"},
    )
    assert r.status_code == 201
    return r.json()
