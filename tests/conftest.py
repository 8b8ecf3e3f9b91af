"""Shared test fixtures for the template config service."""

import os

# Keep test runs off any developer database configured in .env
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_FORMAT", "console")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from template_config.config import Settings  # noqa: E402
from template_config.dependencies import create_engine, create_session_factory  # noqa: E402
from template_config.main import app  # noqa: E402
from template_config.schema import apply_schema  # noqa: E402
from tests.helpers.factories import Parents, seed_parents  # noqa: E402

# ---------------------------------------------------------------------------
# In-memory SQLite database (foreign keys enforced), fresh for every test
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Async engine over a private in-memory database with the schema applied."""
    settings = Settings(database_url="sqlite+aiosqlite://")
    engine = create_engine(settings)
    await apply_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture()
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a real async DB session."""
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# HTTP client fixture (FastAPI app wired to the in-memory database)
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(engine, session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app."""
    app.state.engine = engine
    app.state.session_factory = session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Parent rows
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def parents(db_session) -> Parents:
    """Committed sections, value types and defaults."""
    return await seed_parents(db_session)
