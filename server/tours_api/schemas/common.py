"""Common Pydantic schemas."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="Name of the invalid parameter")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")


class PaginationLinks(BaseModel):
    """Navigation links for a page of results."""

    first: str = Field(..., description="URL of the first page")
    last: str = Field(..., description="URL of the last page")
    prev: Optional[str] = Field(None, description="URL of the previous page")
    next: Optional[str] = Field(None, description="URL of the next page")


class PaginationMeta(BaseModel):
    """Page-based pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(..., ge=1, description="Requested page number (1-indexed)")
    last_page: int = Field(..., ge=1, description="Number of the last page")
    per_page: int = Field(..., ge=1, description="Maximum records per page")
    total: int = Field(..., ge=0, description="Total matching records")
    from_: Optional[int] = Field(None, alias="from", description="Position of the first record on this page")
    to: Optional[int] = Field(None, description="Position of the last record on this page")
    path: str = Field(..., description="Endpoint URL without query string")
