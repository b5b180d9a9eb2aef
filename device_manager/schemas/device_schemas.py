from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from device_manager.models import MIN_DEVICE_ID, MAX_DEVICE_ID

# --- Device request and response schemas ---

# Label used in the "<label> is required." message of each required field.
REQUIRED_FIELD_LABELS = {
    "name": "device",
    "brand": "brand",
}

class CreateDeviceRequest(BaseModel):
    """Schema for creating new Device. Any supplied id is ignored."""
    id: Optional[int] = Field(None, description="Ignored, the store assigns the id")
    name: str = Field(None, validate_default=True, max_length=255)
    brand: str = Field(None, validate_default=True, max_length=255)

    @field_validator("name", "brand", mode="before")
    @classmethod
    def require_not_blank(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError(
                "required",
                "{label} is required.",
                {"label": REQUIRED_FIELD_LABELS[info.field_name]},
            )
        return value

class PatchDeviceRequest(BaseModel):
    """Schema for partially updating Device. Null fields are left unchanged."""
    id: Optional[int] = Field(None, ge=MIN_DEVICE_ID, le=MAX_DEVICE_ID)
    name: Optional[str] = Field(None, max_length=255)
    brand: Optional[str] = Field(None, max_length=255)

class DeviceRead(BaseModel):
    """Schema for reading Device data."""
    id: int
    name: str
    brand: str

    class Config:
        from_attributes = True
