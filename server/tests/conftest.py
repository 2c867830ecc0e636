"""Test configuration and fixtures."""

from datetime import date, timedelta
from itertools import count

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tours_api.core.database import Base, get_db
from tours_api.models import Tour, Travel

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """Create the application with the database dependency bound to the test session."""
    from tours_api.main import create_app

    app = create_app()

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def make_travel(test_session):
    """Factory persisting a travel; slugs are unique per test."""
    sequence = count(1)

    async def _make_travel(**overrides) -> Travel:
        n = next(sequence)
        values = {
            "slug": f"travel-{n}",
            "name": f"Travel {n}",
            "description": "Two weeks along the coast",
            "number_of_days": 5,
            "is_public": True,
        }
        values.update(overrides)
        travel = Travel(**values)
        test_session.add(travel)
        await test_session.commit()
        return travel

    return _make_travel


@pytest.fixture
def make_tour(test_session, today):
    """Factory persisting a tour; each call commits so ids follow call order."""
    sequence = count(1)

    async def _make_tour(travel: Travel, **overrides) -> Tour:
        n = next(sequence)
        values = {
            "travel_id": travel.id,
            "name": f"Tour {n}",
            "starting_date": today,
            "ending_date": today + timedelta(days=1),
            "price": 10000,
        }
        values.update(overrides)
        tour = Tour(**values)
        test_session.add(tour)
        await test_session.commit()
        return tour

    return _make_tour


@pytest.fixture
def tours_url():
    """Build the listing URL for a travel slug."""
    def _tours_url(slug: str) -> str:
        return f"/api/v1/travels/{slug}/tours"

    return _tours_url


@pytest.fixture
def make_travel_stub():
    """Unsaved travel with a fixed id, for building queries without a database."""
    def _make_travel_stub(travel_id: int) -> Travel:
        return Travel(id=travel_id, slug=f"stub-{travel_id}", name="Stub")

    return _make_travel_stub
