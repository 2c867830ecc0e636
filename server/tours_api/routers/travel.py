"""Travel router exposing the tour listing of a travel."""

import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import DatabaseSession, TourListParams
from ..core.exceptions import InternalServerError, ProblemDetailsException
from ..core.observability import metrics_collector
from ..schemas.common import PaginationLinks, PaginationMeta, Problem
from ..schemas.tour import TourListRequest, TourListResponse, TourResource
from ..services.tour_service import Page, TourService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/travels", tags=["travel"])


def _page_url(request: Request, page: int) -> str:
    return str(request.url.include_query_params(page=page))


def _build_listing(request: Request, page: Page) -> TourListResponse:
    """Shape a page of Tour entities into the listing envelope."""
    links = PaginationLinks(
        first=_page_url(request, 1),
        last=_page_url(request, page.last_page),
        prev=_page_url(request, page.page - 1) if page.page > 1 else None,
        next=_page_url(request, page.page + 1) if page.page < page.last_page else None,
    )
    meta = PaginationMeta(
        current_page=page.page,
        last_page=page.last_page,
        per_page=page.per_page,
        total=page.total,
        from_=page.first_item,
        to=page.last_item,
        path=str(request.url.replace(query="")),
    )
    return TourListResponse(
        data=[TourResource.model_validate(tour) for tour in page.items],
        links=links,
        meta=meta,
    )


@router.get(
    "/{slug}/tours",
    response_model=TourListResponse,
    responses={404: {"model": Problem}, 422: {"model": Problem}, 500: {"model": Problem}},
)
async def list_travel_tours(
    slug: str,
    request: Request,
    params: TourListRequest = TourListParams,
    db: AsyncSession = DatabaseSession,
) -> JSONResponse:
    """
    List the tours of a travel.

    Supports inclusive price and date range filters, sorting by a single
    allow-listed field, and page-based pagination (15 tours per page).
    """
    tour_service = TourService(db)

    try:
        travel = await tour_service.get_travel_by_slug_or_raise(slug)
        page = await tour_service.list_tours(travel, params)

    except ProblemDetailsException:
        # Re-raise Problem Details exceptions as-is
        raise

    except SQLAlchemyError as e:
        logger.error(
            "Storage error while listing tours",
            extra={
                "slug": slug,
                "filters": params.applied_options(),
                "error": str(e)
            },
            exc_info=True
        )
        raise InternalServerError(detail="Tours could not be retrieved")

    metrics_collector.record_tour_listing(slug, page.total, params.applied_options())

    response_data = _build_listing(request, page)
    return JSONResponse(
        status_code=200,
        content=response_data.model_dump(mode="json", by_alias=True)
    )
