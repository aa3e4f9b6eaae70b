"""Root conftest - shared test configuration and the in-memory database.

Invariants:
    - Every test gets a fresh in-memory SQLite database built from Base.metadata
    - Settings never read a real DATABASE_URL during tests
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from masterdata.db.base import Base  # noqa: E402
from masterdata.models import Gender, IdType, Role, Title  # noqa: E402

# A valid national identity number: born 1980-01-01, male, citizen.
VALID_ID_NUMBER = "8001015009087"


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_reference(test_db):
    """Roles, the national ID type, a passport type, one title and two genders."""
    rows = {
        "role_user": Role(name="ROLE_USER", description="Standard user", created_by="seed"),
        "role_admin": Role(name="ROLE_ADMIN", description="Administrator", created_by="seed"),
        "national_id": IdType(code="ID", description="National identity number", created_by="seed"),
        "passport": IdType(code="PP", description="Passport", created_by="seed"),
        "mr": Title(code="MR", description="Mister", created_by="seed"),
        "male": Gender(code="M", description="Male", created_by="seed"),
        "female": Gender(code="F", description="Female", created_by="seed"),
    }
    test_db.add_all(rows.values())
    await test_db.commit()
    return rows
