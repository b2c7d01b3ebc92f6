# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real PostgreSQL, no mocks.

A session-scoped container (started once per test run) provides a real
PostgreSQL instance migrated with Alembic. Function-scoped fixtures give each
test an isolated DB session with savepoint rollback so tests don't leak state.
"""

import os

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

# ---------------------------------------------------------------------------
# Mark all tests in this directory as integration
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration

_DB_PACKAGE = os.path.join(os.path.dirname(__file__), "..", "..", "..", "db")


# ---------------------------------------------------------------------------
# Session-scoped: container + engine + migrations
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def pg_container():
    """Start postgres:16 via testcontainers."""
    with PostgresContainer(
        image="postgres:16",
        username="test",
        password="test",
        dbname="test",
    ) as pg:
        yield pg


@pytest.fixture(scope="session")
def db_url(pg_container):
    """Async DB URL for asyncpg."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def sync_db_url(pg_container):
    """Sync DB URL for Alembic (psycopg2)."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql://test:test@{host}:{port}/test"


@pytest.fixture(scope="session", autouse=True)
def _run_migrations(sync_db_url):
    """Run alembic upgrade head against the container."""
    os.environ["DATABASE_URL"] = sync_db_url
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(os.path.join(_DB_PACKAGE, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(_DB_PACKAGE, "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", sync_db_url)
    command.upgrade(alembic_cfg, "head")


@pytest.fixture(scope="session")
def async_engine(db_url, _run_migrations):
    """Create an async engine pointing at the test container."""
    engine = create_async_engine(db_url, echo=False, poolclass=NullPool)
    yield engine


# ---------------------------------------------------------------------------
# Function-scoped: per-test session with savepoint rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Per-test DB session with savepoint rollback.

    Service-level ``commit()`` calls release a savepoint instead of the outer
    transaction, so everything a test writes is rolled back afterwards.
    """
    conn = await async_engine.connect()
    txn = await conn.begin()
    session = AsyncSession(
        bind=conn, join_transaction_mode="create_savepoint", expire_on_commit=False
    )
    yield session
    await session.close()
    await txn.rollback()
    await conn.close()


@pytest.fixture
def client_factory(db_session, async_engine):
    """Factory returning an async httpx client bound to ``db_session``."""
    from db import DatabaseService
    from db.database import get_db, get_db_service

    from src.main import app

    async def _make():
        async def _get_db():
            yield db_session

        async def _get_db_service():
            return DatabaseService(engine=async_engine)

        app.dependency_overrides[get_db] = _get_db
        app.dependency_overrides[get_db_service] = _get_db_service
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        return httpx.AsyncClient(transport=transport, base_url="http://test")

    yield _make

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Seed data helper
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def clinic(db_session):
    """Twelve Smiths, one Franklin, two Davises and a pet with visits.

    Returns a dict of name -> owner id; Smith ids are in insertion order.
    """
    from datetime import date

    from db.models import Owner, Pet, PetType, Visit

    cat = PetType(name="cat")
    db_session.add(cat)

    smiths = [
        Owner(
            first_name=f"Pat{i}",
            last_name="Smith",
            address=f"{i} Main St.",
            city="Madison",
            telephone=f"60855500{i:02d}",
        )
        for i in range(1, 13)
    ]
    franklin = Owner(
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )
    betty = Owner(
        first_name="Betty",
        last_name="Davis",
        address="638 Cardinal Ave.",
        city="Sun Prairie",
        telephone="6085551749",
    )
    harold = Owner(
        first_name="Harold",
        last_name="Davis",
        address="563 Friendly St.",
        city="Windsor",
        telephone="6085553198",
    )
    db_session.add_all([*smiths, franklin, betty, harold])
    await db_session.flush()

    leo = Pet(name="Leo", birth_date=date(2010, 9, 7), type_id=cat.id, owner_id=franklin.id)
    db_session.add(leo)
    await db_session.flush()
    db_session.add(Visit(pet_id=leo.id, visit_date=date(2013, 1, 1), description="rabies shot"))
    await db_session.flush()

    return {
        "smiths": [o.id for o in smiths],
        "franklin": franklin.id,
        "davis": [betty.id, harold.id],
    }
