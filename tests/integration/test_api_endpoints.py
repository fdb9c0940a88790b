"""API endpoint integration tests.

Tests the FastAPI endpoints for wage parsing and calculation.
"""

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Health endpoint should return 200."""
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data


class TestParseEndpoint:
    """Test POST /api/v1/wages/parse."""

    async def test_parse_line(self, client: AsyncClient):
        """Rate and summed hours are returned."""
        response = await client.post(
            "/api/v1/wages/parse", json={"line": "rate *75,5 for 10 20 hours"}
        )
        assert response.status_code == 200
        assert response.json() == {"rate": 75.5, "hours": 30.0}

    async def test_parse_missing_marker(self, client: AsyncClient):
        """Parse errors map to 422 with the error kind."""
        response = await client.post(
            "/api/v1/wages/parse", json={"line": "no asterisk here"}
        )
        assert response.status_code == 422
        assert response.json()["code"] == "MISSING_MARKER"

    async def test_parse_overflowing_hours(self, client: AsyncClient):
        """A digit run too large for a float is a 422, never a null."""
        response = await client.post(
            "/api/v1/wages/parse", json={"line": "*50 " + "9" * 400}
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_NUMBER"

    async def test_parse_no_hours(self, client: AsyncClient):
        """A line without hours is rejected."""
        response = await client.post("/api/v1/wages/parse", json={"line": "*50"})
        assert response.status_code == 422
        assert response.json()["code"] == "NO_HOURS_FOUND"


class TestCalculateEndpoint:
    """Test POST /api/v1/wages/calculate."""

    async def test_calculate_from_line(self, client: AsyncClient):
        """A line supplies rate and hours; the rest is explicit."""
        response = await client.post(
            "/api/v1/wages/calculate",
            json={
                "line": "*50 25.5",
                "step_increase": 10,
                "step_hours": 10,
                "already_paid": 485,
                "note": "March",
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert data["per_hour"] == 50.0
        assert data["worked_hours"] == 25.5
        assert data["total_earned"] == "1485.00"
        assert data["already_paid"] == "485.00"
        assert data["remaining"] == "1000.00"
        assert len(data["segments"]) == 3
        assert data["segments"][2]["is_remainder"] is True
        assert data["segments"][2]["amount"] == "385.00"
        assert "March" in data["summary"]

    async def test_calculate_explicit_values(self, client: AsyncClient):
        """Explicit rate and hours are used without a line."""
        response = await client.post(
            "/api/v1/wages/calculate",
            json={"per_hour": 50, "worked_hours": 40, "step_increase": 0},
        )
        assert response.status_code == 200
        assert response.json()["total_earned"] == "2000.00"

    async def test_calculate_defaults(self, client: AsyncClient):
        """An empty submission uses the configured defaults."""
        response = await client.post("/api/v1/wages/calculate", json={})
        assert response.status_code == 200
        assert response.json()["total_earned"] == "2600.00"

    async def test_calculate_validation_error(self, client: AsyncClient):
        """Out-of-range inputs are listed."""
        response = await client.post(
            "/api/v1/wages/calculate",
            json={"step_hours": 0, "already_paid": -1},
        )
        assert response.status_code == 422

        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert "Already paid amount cannot be negative" in data["errors"]

    async def test_calculate_overflowing_line(self, client: AsyncClient):
        """An overflowing digit run is a 422 rather than a server error."""
        response = await client.post(
            "/api/v1/wages/calculate", json={"line": "*50 " + "9" * 400}
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_NUMBER"

    async def test_calculate_tier_cap(self, client: AsyncClient):
        """Hours spanning too many tiers are rejected before calculating."""
        response = await client.post(
            "/api/v1/wages/calculate", json={"line": "*50 100000000000"}
        )
        assert response.status_code == 422

        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"] == [
            "Too many rate steps: 10000000000 exceeds the maximum of 10000"
        ]

    async def test_calculate_parse_error(self, client: AsyncClient):
        """A bad line is reported with its error kind."""
        response = await client.post(
            "/api/v1/wages/calculate", json={"line": "*1.2.3 40"}
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_NUMBER"


class TestDefaultsEndpoint:
    """Test GET /api/v1/wages/defaults."""

    async def test_defaults(self, client: AsyncClient):
        """Default form values are returned."""
        response = await client.get("/api/v1/wages/defaults")
        assert response.status_code == 200
        assert response.json() == {
            "per_hour": 50.0,
            "worked_hours": 40.0,
            "step_increase": 10.0,
            "step_hours": 10.0,
            "already_paid": 0.0,
        }
