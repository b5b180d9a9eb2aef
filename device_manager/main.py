from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging
from device_manager.api.api_router import api_router
from device_manager.api.error_handlers import register_exception_handlers
from device_manager.core.config import settings
from device_manager.db.session import AsyncSessionLocal, init_db, dispose_engine
from device_manager.seeds.initial_data import seed_database

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}...")

    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()
    if settings.SEED_ON_STARTUP:
        async with AsyncSessionLocal() as session:
            await seed_database(session)

    logger.info(f"{settings.PROJECT_NAME} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    await dispose_engine()
    logger.info(f"{settings.PROJECT_NAME} shutdown complete")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="REST API for managing Device records.",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
    return response

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/", tags=["Root"])
async def read_root():
    """A simple health check endpoint."""
    return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}!", "version": settings.VERSION}

@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION
    }
