import logging
import math
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from device_manager.data_access import DeviceRepository
from device_manager.models import Device, DEVICE_MUTABLE_FIELDS
from device_manager.schemas.device_schemas import CreateDeviceRequest, PatchDeviceRequest, DeviceRead
from device_manager.schemas.response_schemas import PaginatedData, PaginationMeta
from device_manager.services.merge import copy_non_null_properties

logger = logging.getLogger(__name__)

INVALID_DEVICE_ID_MESSAGE = "Device Not found or Invalid Device Id."
NOTHING_TO_UPDATE_MESSAGE = "At least one of name or device value are needed."


class InvalidDevicePatchError(Exception):
    pass

class DeviceNotFoundError(Exception):
    pass


class DeviceService:
    """Device operations on top of a DeviceRepository."""

    def __init__(self, repository: DeviceRepository):
        self.repository = repository

    async def get_device(self, db: AsyncSession, device_id: int) -> Optional[Device]:
        return await self.repository.find_by_id(db, device_id)

    async def create_device(self, db: AsyncSession, device_in: CreateDeviceRequest) -> Device:
        # The store assigns the id, a client supplied one is dropped here
        device = Device(name=device_in.name, brand=device_in.brand)
        saved = await self.repository.save(db, device)
        logger.info(f"Created device {saved.id} ({saved.brand} {saved.name})")
        return saved

    async def list_devices(self, db: AsyncSession) -> list[Device]:
        return await self.repository.find_all(db)

    async def list_devices_paged(self, db: AsyncSession, *, page: int, size: int) -> PaginatedData:
        crud_data = await self.repository.find_all_paged(db, page=page, size=size)
        total = crud_data.get("total_count") or 0
        return PaginatedData[DeviceRead](
            list=crud_data["data"],
            meta=PaginationMeta(
                total=total,
                totalPages=math.ceil(total / size),
                pageSize=size,
                pageNum=page,
            ),
        )

    async def search_devices(self, db: AsyncSession, term: str) -> list[Device]:
        return await self.repository.find_by_brand_contains_ignore_case(db, term)

    async def patch_device(self, db: AsyncSession, patch_in: PatchDeviceRequest) -> Device:
        """
        Partially update a device.

        Only the mergeable fields that are set on `patch_in` overwrite the
        stored record; the rest keep their stored values. The load, merge and
        save run without locking, so concurrent patches of one device are
        last-writer-wins.

        Raises:
            InvalidDevicePatchError: `id` is missing or unknown, or no
                mergeable field is set.
        """
        if patch_in.id is None:
            raise InvalidDevicePatchError(INVALID_DEVICE_ID_MESSAGE)
        if all(getattr(patch_in, field, None) is None for field in DEVICE_MUTABLE_FIELDS):
            raise InvalidDevicePatchError(NOTHING_TO_UPDATE_MESSAGE)

        device = await self.repository.find_by_id(db, patch_in.id)
        if device is None:
            raise InvalidDevicePatchError(INVALID_DEVICE_ID_MESSAGE)

        changed = copy_non_null_properties(patch_in, device, DEVICE_MUTABLE_FIELDS)
        saved = await self.repository.save(db, device)
        logger.info(f"Patched device {saved.id}, fields: {', '.join(changed)}")
        return saved

    async def delete_device(self, db: AsyncSession, device_id: int) -> None:
        if not await self.repository.exists_by_id(db, device_id):
            logger.warning(f"Delete rejected, device {device_id} does not exist")
            raise DeviceNotFoundError(f"Device {device_id} not found")
        await self.repository.delete_by_id(db, device_id)
        logger.info(f"Deleted device {device_id}")
