"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint returns expected structure."""
        response = await client.get("/health")
        data = response.json()

        assert "status" in data
        assert "version" in data
        assert "timestamp" in data
        assert "environment" in data

    @pytest.mark.asyncio
    async def test_health_status_is_healthy(self, client: AsyncClient) -> None:
        """Test that health status is 'healthy'."""
        response = await client.get("/health")
        data = response.json()

        assert data["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_version_format(self, client: AsyncClient) -> None:
        """Test that version has expected format."""
        response = await client.get("/health")
        data = response.json()

        # Check version follows semver pattern
        assert data["version"] == "1.0.0"


class TestDetailedHealthEndpoint:
    """Tests for the readiness endpoint."""

    @pytest.mark.asyncio
    async def test_reports_dependencies(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["database"] == "healthy"
        assert data["text_provider"] == "unconfigured"

    @pytest.mark.asyncio
    async def test_missing_provider_key_is_degraded(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")

        assert response.json()["status"] == "degraded"

    @pytest.mark.asyncio
    async def test_timestamps_are_utc(self, client: AsyncClient) -> None:
        basic = await client.get("/health")
        detailed = await client.get("/health/detailed")

        assert basic.json()["timestamp"].endswith("+00:00")
        assert detailed.json()["timestamp"].endswith("+00:00")
