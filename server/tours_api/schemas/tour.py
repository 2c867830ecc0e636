"""Tour listing Pydantic schemas."""

import re
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import PaginationLinks, PaginationMeta

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_price(amount: int) -> str:
    """Render a minor-unit amount as a major-unit string with two decimals."""
    return f"{Decimal(amount) / 100:.2f}"


class SortField(str, Enum):
    """Fields a tour listing may be sorted by."""
    PRICE = "price"
    STARTING_DATE = "starting_date"
    ENDING_DATE = "ending_date"


class SortOrder(str, Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"


class TourListRequest(BaseModel):
    """Optional filter, sort and page parameters for a tour listing."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    price_from: Decimal | None = Field(
        None, alias="priceFrom", ge=0, max_digits=12, description="Minimum price in major units"
    )
    price_to: Decimal | None = Field(
        None, alias="priceTo", ge=0, max_digits=12, description="Maximum price in major units"
    )
    date_from: date | None = Field(None, alias="dateFrom", description="Earliest starting date")
    date_to: date | None = Field(None, alias="dateTo", description="Latest ending date")
    sort_by: SortField | None = Field(None, alias="sortBy", description="Field to sort by")
    sort_order: SortOrder | None = Field(None, alias="sortOrder", description="Sort direction")
    page: int = Field(1, ge=1, description="Page number (1-indexed)")

    @field_validator(
        "price_from", "price_to", "date_from", "date_to", "sort_by", "sort_order", mode="before"
    )
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        """Treat empty query parameters as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Runs before blank_as_missing, so blank values must pass through here
    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def require_iso_date(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip() and not _ISO_DATE.match(v.strip()):
            raise ValueError("Date must use the YYYY-MM-DD format")
        return v

    @field_validator("page", mode="before")
    @classmethod
    def default_blank_page(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return 1
        return v

    @property
    def sort_requested(self) -> bool:
        """Sorting applies only when both the field and the direction are given."""
        return self.sort_by is not None and self.sort_order is not None

    def applied_options(self) -> list[str]:
        """Names of the filters and sort options present on this request."""
        applied = [
            name
            for name, value in (
                ("priceFrom", self.price_from),
                ("priceTo", self.price_to),
                ("dateFrom", self.date_from),
                ("dateTo", self.date_to),
            )
            if value is not None
        ]
        if self.sort_requested:
            applied.append(f"sort:{self.sort_by.value}")
        return applied


class TourResource(BaseModel):
    """Tour representation returned by the listing endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Unique tour ID")
    name: str = Field(..., description="Tour name")
    starting_date: date = Field(..., description="First day of the tour")
    ending_date: date = Field(..., description="Last day of the tour")
    price: str = Field(..., description="Price in major units with two decimals", examples=["123.45"])

    @field_validator("price", mode="before")
    @classmethod
    def format_minor_units(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return format_price(v)
        return v


class TourListResponse(BaseModel):
    """A page of tours with pagination links and metadata."""

    data: list[TourResource] = Field(..., description="Tours on this page")
    links: PaginationLinks
    meta: PaginationMeta
