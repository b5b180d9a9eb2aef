"""
Shared pytest fixtures for device-manager tests.
"""
import os

# Settings are read at import time, so the environment is prepared before
# anything from device_manager is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from device_manager.data_access import DeviceRepository  # noqa: E402
from device_manager.models import Base, Device  # noqa: E402


def make_device(device_id: int, name: str, brand: str) -> Device:
    return Device(id=device_id, name=name, brand=brand)


@pytest.fixture
def mock_repo():
    """Device store stub; every repository method is an AsyncMock."""
    return AsyncMock(spec=DeviceRepository)


@pytest.fixture
def mock_db():
    """Stand-in for the request's AsyncSession."""
    return MagicMock(name="AsyncSession")


@pytest_asyncio.fixture
async def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s
