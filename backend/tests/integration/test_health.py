"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from article_catalog.config import Settings
from article_catalog.infrastructure.memory import SAMPLE_ARTICLES
from article_catalog.main import app, create_app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_health_check_reports_catalog_size():
    seeded = create_app(Settings(_env_file=None))
    empty = create_app(Settings(_env_file=None, seed_sample_data=False))

    for application, expected in ((seeded, len(SAMPLE_ARTICLES)), (empty, 0)):
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")
        assert response.json()["articles"] == expected
