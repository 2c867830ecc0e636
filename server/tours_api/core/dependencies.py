"""FastAPI dependencies for database sessions and listing parameters."""

from typing import Optional
from fastapi import Depends, Query
from pydantic import ValidationError as PydanticValidationError

from .database import get_db
from .exceptions import ValidationError, violations_from_errors
from ..schemas.tour import TourListRequest


async def get_tour_list_params(
    price_from: Optional[str] = Query(None, alias="priceFrom", description="Minimum price in major units"),
    price_to: Optional[str] = Query(None, alias="priceTo", description="Maximum price in major units"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="Earliest starting date (YYYY-MM-DD)"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="Latest ending date (YYYY-MM-DD)"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="price, starting_date or ending_date"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
) -> TourListRequest:
    """
    Collect the raw listing query parameters and validate them together.

    Parameters arrive as strings so that empty values can be treated as
    absent before type conversion.

    Raises:
        ValidationError: If any present parameter is malformed
    """
    try:
        return TourListRequest.model_validate({
            "priceFrom": price_from,
            "priceTo": price_to,
            "dateFrom": date_from,
            "dateTo": date_to,
            "sortBy": sort_by,
            "sortOrder": sort_order,
            "page": page,
        })
    except PydanticValidationError as e:
        raise ValidationError(
            detail="One or more query parameters are invalid",
            violations=violations_from_errors(e.errors()),
        )


DatabaseSession = Depends(get_db)
TourListParams = Depends(get_tour_list_params)
