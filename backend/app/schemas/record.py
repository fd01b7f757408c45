"""
Collection and record request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


# ==================== Collections ====================

class CollectionListResponse(BaseModel):
    """Names of all collections in the records database."""
    success: bool = True
    collections: list[str] = Field(..., description="Collection names")


# ==================== Records ====================

class RecordPageResponse(BaseModel):
    """One page of records with pagination metadata."""
    success: bool = True
    total: int = Field(..., description="Total matching records")
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Records per page")
    total_pages: int = Field(..., alias="totalPages", description="ceil(total / limit)")
    data: list[dict[str, Any]] = Field(default=[], description="Records on this page")

    class Config:
        populate_by_name = True


class RecordResponse(BaseModel):
    """A single record."""
    success: bool = True
    data: dict[str, Any]


class RecordUpdate(BaseModel):
    """
    Partial record update.

    Every field is optional and values are stored as sent (spreadsheet cells
    may hold numbers); falsy values are treated as "leave unchanged".
    Unknown keys are ignored.
    """
    name: Optional[Any] = None
    father_name: Optional[Any] = Field(None, alias="fatherName")
    address: Optional[Any] = None
    phone_number: Optional[Any] = Field(None, alias="phoneNumber")
    email: Optional[Any] = None

    class Config:
        populate_by_name = True
        extra = "ignore"

    def field_values(self) -> dict[str, Any]:
        """Values keyed by their stored (camelCase) field names."""
        return self.model_dump(by_alias=True)


class RecordUpdateResponse(BaseModel):
    """Result of a record update."""
    success: bool = True
    message: str = "Record updated successfully"
    modified_count: int = Field(..., alias="modifiedCount")

    class Config:
        populate_by_name = True


# ==================== Errors ====================

class ErrorResponse(BaseModel):
    """Uniform error envelope."""
    success: bool = False
    error: str
