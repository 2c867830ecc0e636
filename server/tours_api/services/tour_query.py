"""Construction of filtered, sorted tour listing queries."""

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from sqlalchemy import Select, and_, select

from ..core.exceptions import InvalidSortFieldError
from ..models.tour import Tour
from ..models.travel import Travel
from ..schemas.tour import SortField, SortOrder, TourListRequest

MINOR_UNITS_PER_MAJOR = 100

# Only these columns can ever reach ORDER BY
SORTABLE_COLUMNS = {
    SortField.PRICE: Tour.price,
    SortField.STARTING_DATE: Tour.starting_date,
    SortField.ENDING_DATE: Tour.ending_date,
}


def to_minor_units(amount: Decimal, rounding: str = ROUND_FLOOR) -> int:
    """
    Convert a major-unit amount into integer minor units.

    Fractions of a minor unit are rounded with ``rounding``. Lower bounds
    round up and upper bounds round down so that comparisons against the
    integer price column match the decimal bound exactly.
    """
    minor = Decimal(amount) * MINOR_UNITS_PER_MAJOR
    return int(minor.to_integral_value(rounding=rounding))


def build_tours_query(travel: Travel, params: TourListRequest) -> Select:
    """
    Build the listing query for the tours of ``travel``.

    Every filter is optional and applied only when present; present
    filters are combined with AND and all bounds are inclusive. Sorting
    is applied only when both the field and the direction are given.
    Rows with equal sort keys are ordered by starting date, then by id.

    Raises:
        InvalidSortFieldError: If the sort field is not sortable
    """
    conditions = [Tour.travel_id == travel.id]

    if params.price_from is not None:
        conditions.append(Tour.price >= to_minor_units(params.price_from, ROUND_CEILING))

    if params.price_to is not None:
        conditions.append(Tour.price <= to_minor_units(params.price_to, ROUND_FLOOR))

    if params.date_from is not None:
        conditions.append(Tour.starting_date >= params.date_from)

    if params.date_to is not None:
        conditions.append(Tour.ending_date <= params.date_to)

    stmt = select(Tour).where(and_(*conditions))

    ordering = []
    if params.sort_requested:
        column = SORTABLE_COLUMNS.get(params.sort_by)
        if column is None:
            raise InvalidSortFieldError(
                str(getattr(params.sort_by, "value", params.sort_by)),
                [field.value for field in SORTABLE_COLUMNS],
            )
        ordering.append(column.desc() if params.sort_order == SortOrder.DESC else column.asc())
        if params.sort_by != SortField.STARTING_DATE:
            ordering.append(Tour.starting_date.asc())

    ordering.append(Tour.id.asc())
    return stmt.order_by(*ordering)
