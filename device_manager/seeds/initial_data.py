import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from device_manager.data_access import DeviceRepository, device_repo
from device_manager.models import Device

logger = logging.getLogger(__name__)

SAMPLE_DEVICES = [
    ("3310", "Nokia"),
    ("Galaxy S5", "Samsung"),
    ("iPhone 15", "Apple"),
    ("Pixel 8", "Google"),
]

async def seed_database(db: AsyncSession, repository: DeviceRepository = device_repo) -> int:
    """Insert the sample devices into an empty table. Returns how many were added."""
    existing = (await db.execute(select(func.count(Device.id)))).scalar() or 0
    if existing:
        logger.info(f"Devices table already holds {existing} rows, skipping seed.")
        return 0

    for name, brand in SAMPLE_DEVICES:
        await repository.save(db, Device(name=name, brand=brand))
    logger.info(f"Seeded {len(SAMPLE_DEVICES)} devices.")
    return len(SAMPLE_DEVICES)

async def main() -> None:
    from device_manager.db.session import AsyncSessionLocal, init_db, dispose_engine

    await init_db()
    try:
        async with AsyncSessionLocal() as session:
            await seed_database(session)
    finally:
        await dispose_engine()

if __name__ == "__main__":
    # Run as a module from the project root:
    # python -m device_manager.seeds.initial_data
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
