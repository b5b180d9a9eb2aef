import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from device_manager.schemas.response_schemas import ValidationErrorResponse

logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Malformed JSON request body."


def format_validation_error(error: dict[str, Any]) -> str:
    """Render one pydantic error as a client facing message."""
    if error.get("type") == "required":
        return error["msg"]
    if error.get("type") == "json_invalid":
        return MALFORMED_BODY_MESSAGE
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc) or "request"
    return f"{field}: {error.get('msg')}"

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [format_validation_error(error) for error in exc.errors()]
    logger.info(f"{request.method} {request.url.path} rejected: {errors}")
    body = ValidationErrorResponse(status=status.HTTP_400_BAD_REQUEST, errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
