import logging

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from device_manager.core.config import settings
from device_manager.models import Base

logger = logging.getLogger(__name__)

# Async engine (for FastCRUD and the device repository)
async_engine = create_async_engine(settings.async_database_url, echo=settings.DB_ECHO)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, expire_on_commit=False
)

# Async dependency, one session per request
async def get_async_db():
    async with AsyncSessionLocal() as session:
        yield session

async def init_db() -> None:
    """Create any missing tables. There are no migrations; existing tables are left as they are."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")

async def dispose_engine() -> None:
    await async_engine.dispose()
