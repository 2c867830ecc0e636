"""Application smoke tests without database dependency."""

import pytest
from httpx import ASGITransport, AsyncClient

from tours_api.main import create_app


def test_import_app():
    """Test that the application factory builds an app with the listing route."""
    app = create_app()

    paths = app.openapi()["paths"]
    assert "/api/v1/travels/{slug}/tours" in paths
    assert "/metrics" in paths


@pytest.mark.asyncio
async def test_api_health_endpoints():
    """Test the health endpoints without database dependency."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

        response = await client.get("/info")
        assert response.status_code == 200
        data = response.json()
        assert "service" in data
        assert "version" in data


@pytest.mark.asyncio
async def test_metrics_endpoint():
    """Test the metrics endpoint."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/metrics")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_openapi_docs():
    """Test that OpenAPI docs are available in development."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/docs")
        assert response.status_code == 200

        response = await client.get("/openapi.json")
        assert response.status_code == 200
        parameters = response.json()["paths"]["/api/v1/travels/{slug}/tours"]["get"]["parameters"]
        names = {parameter["name"] for parameter in parameters}
        assert {"priceFrom", "priceTo", "dateFrom", "dateTo", "sortBy", "sortOrder", "page"} <= names
