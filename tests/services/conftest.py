"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - get_db dependency overridden to use the per-test SQLite database
    - db_manager patched so the readiness probe sees the test engine
    - fake_client swaps the SQL gateway for InMemoryUserRepository

Design Decisions:
    - SQLite in-memory: fast, no external dependency, enforces the unique email index
    - Overrides cleared after every test: app is a module-level singleton
"""

import pytest
from httpx import ASGITransport, AsyncClient

import user_api.infrastructure.database as db_module
from user_api.api.routes.users import get_user_handlers
from user_api.infrastructure.database import DatabaseSessionManager, get_db
from user_api.main import app
from user_api.services.user_handlers import UserHandlers
from tests.services.fake_user_repository import InMemoryUserRepository


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
def fake_repo():
    return InMemoryUserRepository()


@pytest.fixture
async def fake_client(fake_repo):
    """Test client backed by the in-memory repository; app errors become 500 responses."""
    app.dependency_overrides[get_user_handlers] = lambda: UserHandlers(fake_repo)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
