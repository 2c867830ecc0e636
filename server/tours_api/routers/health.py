"""Health, readiness and service information endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.dependencies import DatabaseSession
from ..core.observability import SERVICE_NAME, SERVICE_VERSION
from ..schemas.health import HealthResponse, HealthStatus, ReadinessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> JSONResponse:
    """Report that the process is up."""
    response_data = HealthResponse(
        status=HealthStatus.HEALTHY,
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=response_data.model_dump(mode="json")
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(db: AsyncSession = DatabaseSession) -> JSONResponse:
    """
    Report whether the service can serve listings.

    Runs a trivial query against the database; returns 503 if it fails.
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning(
            "Readiness check failed",
            extra={"check": "database", "error": str(e)}
        )
        database = "unavailable"

    ready = database == "ok"
    response_data = ReadinessResponse(
        status=HealthStatus.READY if ready else HealthStatus.UNAVAILABLE,
        service=SERVICE_NAME,
        checks={"database": database},
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response_data.model_dump(mode="json")
    )


@router.get("/info", response_model=dict)
async def service_info():
    """
    Service information endpoint.

    Returns:
        dict: Service name, version and available endpoints
    """
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": "Read-only listing of the tours of a travel",
        "environment": settings.environment,
        "debug": settings.debug,
        "features": {
            "price_filter": True,
            "date_filter": True,
            "sorting": True,
            "pagination": True,
            "problem_details": True,
        },
        "endpoints": {
            "tours": "/api/v1/travels/{slug}/tours",
            "health": "/health",
            "readiness": "/ready",
            "metrics": "/metrics",
            "docs": "/docs" if settings.debug else None,
        },
    }
