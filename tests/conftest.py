import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from filmes_api.app import app  # noqa: E402
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository  # noqa: E402
from filmes_api.domain.ports.services.logger import LoggerPort  # noqa: E402
from filmes_api.infrastructure.persistence.database import get_session  # noqa: E402
from filmes_api.infrastructure.persistence.models import table_registry  # noqa: E402


class BaseIntegrationTest:
    """Base class for integration tests backed by an in-memory database"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create test database engine"""
        engine = create_async_engine(
            "sqlite+aiosqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def db_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, db_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield db_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


@pytest.fixture
def mock_filme_repository():
    """Mock filme repository for use case testing"""
    return AsyncMock(spec=FilmeRepository)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
