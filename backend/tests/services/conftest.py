"""Service test fixtures - async DB, platform config and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_platform_config overridden per test
    - Access tokens seeded for each permission profile the routes check

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the partial unique index
      on plans.is_default is supported by SQLite too
    - platform_config starts empty (no routers subtree, no docker limits)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from catalog.db.base import Base
import catalog.models  # noqa: F401
from catalog.infrastructure.database import get_db, DatabaseSessionManager
from catalog.infrastructure.platform_config import PlatformConfig, get_platform_config
from catalog.models.access_token import AccessToken
from catalog.services.plan_service import PlanService
from catalog.services.plan_store import SqlPlanStore
import catalog.infrastructure.database as db_module
from catalog.main import app

TOKENS = {
    "admin-token": ("admin@example.com", ["*"]),
    "creator-token": ("creator@example.com", ["app.create"]),
    "plan-admin-token": ("planner@example.com", ["plan"]),
    "reader-token": ("reader@example.com", []),
}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def platform_config():
    return PlatformConfig()


@pytest.fixture
def plan_service(test_db, platform_config):
    return PlanService(SqlPlanStore(test_db), platform_config)


@pytest.fixture
async def seed_tokens(test_db):
    for token, (email, scopes) in TOKENS.items():
        test_db.add(AccessToken(token=token, user_email=email, scopes=scopes))
    await test_db.commit()
    return TOKENS


@pytest.fixture
async def client(test_engine, test_session_factory, platform_config, seed_tokens):
    """FastAPI test client with DB and platform config overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_platform_config] = lambda: platform_config

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def auth():
    """Build an Authorization header for one of the seeded tokens."""
    def _headers(token: str) -> dict:
        return {"Authorization": f"bearer {token}"}
    return _headers
