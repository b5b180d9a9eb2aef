import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from device_manager import schemas
from device_manager.api import dependencies
from device_manager.core.config import settings
from device_manager.db.session import get_async_db
from device_manager.models import MIN_DEVICE_ID, MAX_DEVICE_ID
from device_manager.services.device_service import (
    DeviceService,
    InvalidDevicePatchError,
    DeviceNotFoundError,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# Ids and page offsets must fit the signed 64-bit id column.
DeviceId = Annotated[int, Path(ge=MIN_DEVICE_ID, le=MAX_DEVICE_ID)]
MAX_PAGE = MAX_DEVICE_ID // settings.MAX_PAGE_SIZE

# Fixed paths are registered before "/{device_id}" so they are not taken for ids.

@router.get("/list", response_model=list[schemas.device_schemas.DeviceRead])
async def list_devices(
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """List all devices."""
    return await service.list_devices(db)

@router.get("/paged-list", response_model=schemas.response_schemas.PaginatedData[schemas.device_schemas.DeviceRead])
async def paged_list_devices(
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
    page: Annotated[int, Query(ge=0, le=MAX_PAGE, description="Zero-based page number")] = 0,
    size: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page")] = settings.DEFAULT_PAGE_SIZE,
):
    """List devices one page at a time, with total count and page count."""
    return await service.list_devices_paged(db, page=page, size=size)

@router.get("/search/{search_term}", response_model=list[schemas.device_schemas.DeviceRead])
async def search_devices(
    search_term: str,
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """Search devices whose brand contains the term, ignoring case."""
    return await service.search_devices(db, search_term)

@router.get(
    "/{device_id}",
    response_model=schemas.device_schemas.DeviceRead,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Device not found"}},
)
async def get_device(
    device_id: DeviceId,
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """Get device by ID."""
    device = await service.get_device(db, device_id)
    if not device:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return device

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={status.HTTP_400_BAD_REQUEST: {"model": schemas.response_schemas.ValidationErrorResponse}},
)
async def create_device(
    device_in: schemas.device_schemas.CreateDeviceRequest,
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """Create a new device. Any id in the body is ignored."""
    await service.create_device(db, device_in)
    return Response(status_code=status.HTTP_201_CREATED)

@router.patch(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_400_BAD_REQUEST: {"model": schemas.response_schemas.MessageResponse}},
)
async def update_device(
    device_update: schemas.device_schemas.PatchDeviceRequest,
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """Update device (partial update). The body must carry the id."""
    try:
        await service.patch_device(db, device_update)
    except InvalidDevicePatchError as e:
        logger.warning(f"Patch rejected: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=schemas.response_schemas.MessageResponse(message=str(e)).model_dump(),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Device does not exist"}},
)
async def delete_device(
    device_id: DeviceId,
    db: Annotated[AsyncSession, Depends(get_async_db)],
    service: Annotated[DeviceService, Depends(dependencies.get_device_service)],
):
    """Delete device. A missing device answers 400, not 404."""
    try:
        await service.delete_device(db, device_id)
    except DeviceNotFoundError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
