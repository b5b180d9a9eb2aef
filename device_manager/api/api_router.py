from fastapi import APIRouter
from .routes import devices_routes

api_router = APIRouter()

api_router.include_router(devices_routes.router, prefix="/device", tags=["Devices"])
