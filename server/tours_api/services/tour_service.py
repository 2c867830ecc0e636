"""Tour service for listing the tours of a travel."""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.exceptions import NotFoundError
from ..models.travel import Travel
from ..schemas.tour import TourListRequest
from .tour_query import build_tours_query

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """One page of query results plus the totals needed to describe it."""

    items: list = field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 15

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def first_item(self) -> Optional[int]:
        """1-based position of the first item on this page, None when empty."""
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + 1

    @property
    def last_item(self) -> Optional[int]:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1


class TourService:
    """Service for tour listing operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_travel_by_slug(self, slug: str) -> Optional[Travel]:
        """
        Get travel by slug.

        Args:
            slug: Travel slug to search for

        Returns:
            Travel if found, None otherwise
        """
        stmt = select(Travel).where(Travel.slug == slug)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_travel_by_slug_or_raise(self, slug: str) -> Travel:
        """
        Get travel by slug or raise NotFoundError.

        Raises:
            NotFoundError: If no travel has this slug
        """
        travel = await self.get_travel_by_slug(slug)
        if not travel:
            logger.warning(
                "Travel not found",
                extra={"slug": slug}
            )
            raise NotFoundError(
                resource_type="travel",
                resource_id=slug
            )
        return travel

    async def paginate(self, stmt: Select, page: int, per_page: int) -> Page:
        """
        Execute ``stmt`` for a single page.

        Pages past the end return no items; the totals stay accurate.
        """
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await self.db.execute(count_stmt)).scalar_one()

        items: list = []
        if total and (page - 1) * per_page < total:
            result = await self.db.execute(
                stmt.limit(per_page).offset((page - 1) * per_page)
            )
            items = list(result.scalars())

        return Page(items=items, total=total, page=page, per_page=per_page)

    async def list_tours(
        self,
        travel: Travel,
        params: TourListRequest,
        per_page: Optional[int] = None,
    ) -> Page:
        """
        List a page of the travel's tours matching the request's filters.

        Args:
            travel: Travel owning the tours
            params: Filter, sort and page parameters
            per_page: Page size, defaults to the configured tours per page

        Returns:
            Page of Tour entities
        """
        per_page = per_page or settings.tours_per_page
        stmt = build_tours_query(travel, params)
        page = await self.paginate(stmt, params.page, per_page)

        logger.info(
            "Tour listing completed",
            extra={
                "travel_id": travel.id,
                "page": page.page,
                "returned": len(page.items),
                "total": page.total,
                "filters": params.applied_options(),
            }
        )

        return page
