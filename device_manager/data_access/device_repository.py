from typing import Any, Optional

from fastcrud import FastCRUD, compute_offset
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from device_manager.models import Device
from device_manager.schemas.device_schemas import CreateDeviceRequest, PatchDeviceRequest, DeviceRead

# FastCRUD pattern - existence checks, paging and deletes built-in
CRUDDevice = FastCRUD[Device, CreateDeviceRequest, PatchDeviceRequest, PatchDeviceRequest, PatchDeviceRequest, DeviceRead]


class DeviceRepository:
    """
    Store for Device records.
    Every operation takes the request's session as its first argument.
    """

    def __init__(self, crud: Optional[CRUDDevice] = None):
        self.crud = crud or CRUDDevice(Device)

    async def find_by_id(self, db: AsyncSession, device_id: int) -> Optional[Device]:
        return await db.get(Device, device_id)

    async def save(self, db: AsyncSession, device: Device) -> Device:
        """Insert a new device, or write back every column of a loaded one."""
        db.add(device)
        try:
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            raise
        await db.refresh(device)
        return device

    async def find_all(self, db: AsyncSession) -> list[Device]:
        result = await db.execute(select(Device).order_by(Device.id))
        return list(result.scalars().all())

    async def find_all_paged(self, db: AsyncSession, *, page: int, size: int) -> dict[str, Any]:
        # page is zero-based, compute_offset expects one-based
        offset = compute_offset(page + 1, size)
        return await self.crud.get_multi(
            db=db,
            offset=offset,
            limit=size,
            schema_to_select=DeviceRead,
            return_as_model=True,
            sort_columns="id",
            sort_orders="asc",
        )

    async def find_by_brand_contains_ignore_case(self, db: AsyncSession, term: str) -> list[Device]:
        stmt = (
            select(Device)
            .where(Device.brand.icontains(term, autoescape=True))
            .order_by(Device.id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_id(self, db: AsyncSession, device_id: int) -> bool:
        return await self.crud.exists(db=db, id=device_id)

    async def delete_by_id(self, db: AsyncSession, device_id: int) -> None:
        await self.crud.delete(db=db, id=device_id)


device_repo = DeviceRepository()
