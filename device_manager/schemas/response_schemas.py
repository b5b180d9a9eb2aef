from pydantic import BaseModel, Field
from typing import TypeVar, Generic, List

# A generic type variable that can be any type.
T = TypeVar('T')

class PaginationMeta(BaseModel):
    """Schema for pagination metadata."""
    total: int = Field(..., description="Total number of all items")
    totalPages: int = Field(..., description="Number of pages at the current page size")
    pageSize: int = Field(..., description="Number of items per page")
    pageNum: int = Field(..., description="The current page number, starting at 0")

class PaginatedData(BaseModel, Generic[T]):
    """Schema for a paginated list: one window of items plus its metadata."""
    list: List[T]
    meta: PaginationMeta

class ValidationErrorResponse(BaseModel):
    """Body returned when a request fails validation."""
    status: int = 400
    errors: List[str]

class MessageResponse(BaseModel):
    """Body returned when a patch is rejected."""
    message: str
