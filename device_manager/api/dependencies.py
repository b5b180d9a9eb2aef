from fastapi import Depends

from device_manager.data_access import DeviceRepository, device_repo
from device_manager.services.device_service import DeviceService


def get_device_repository() -> DeviceRepository:
    """Dependency returning the shared device repository."""
    return device_repo

def get_device_service(
    repository: DeviceRepository = Depends(get_device_repository)
) -> DeviceService:
    """
    Dependency building the device service on top of the repository.
    Tests override `get_device_repository` to stub the store.
    """
    return DeviceService(repository)
