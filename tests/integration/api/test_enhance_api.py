"""Integration tests for the profile enhancement API."""

import pytest
from httpx import AsyncClient

from infrastructure.ai.provider import ProviderError, ProviderErrorKind
from tests.unit.conftest import FakeTextProvider


class TestEnhanceAPI:
    """POST /api/v1/profile/enhance."""

    @pytest.mark.asyncio
    async def test_enhances_profile(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        text_provider.responses = [
            "Senior backend engineer with 5+ years of distributed systems experience."
        ]

        response = await authenticated_client.post(
            "/api/v1/profile/enhance",
            json={"profile": "Backend engineer.", "prompt": "make it more senior-sounding"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data == {
            "enhanced_profile": (
                "Senior backend engineer with 5+ years of distributed systems experience."
            ),
            "source": "provider-generated",
            "changed": True,
        }
        assert text_provider.call_count == 1

    @pytest.mark.asyncio
    async def test_unchanged_output_returns_original(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        text_provider.responses = ["Data analyst."]

        response = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Data analyst."}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["enhanced_profile"] == "Data analyst."
        assert data["source"] == "unchanged-fallback"
        assert data["changed"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"profile": ""}, {"profile": "   "}, {"profile": None}])
    async def test_empty_profile_returns_400(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider, body: dict
    ):
        response = await authenticated_client.post("/api/v1/profile/enhance", json=body)

        assert response.status_code == 400
        error = response.json()
        assert error["error_code"] == "EMPTY_PROFILE"
        assert error["details"] == {"field": "profile"}
        assert text_provider.call_count == 0

    @pytest.mark.asyncio
    async def test_long_prompt_returns_400(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        prompt = " ".join(["more"] * 51)

        response = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Backend engineer.", "prompt": prompt}
        )

        assert response.status_code == 400
        error = response.json()
        assert error["error_code"] == "PROMPT_TOO_LONG"
        assert error["message"] == "prompt exceeds 50 words"
        assert error["details"] == {"field": "prompt", "word_count": 51, "max_words": 50}
        assert text_provider.call_count == 0

    @pytest.mark.asyncio
    async def test_very_long_prompt_is_counted_in_words(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        response = await authenticated_client.post(
            "/api/v1/profile/enhance",
            json={"profile": "Backend engineer.", "prompt": "more " * 250},
        )

        assert response.status_code == 400
        error = response.json()
        assert error["error_code"] == "PROMPT_TOO_LONG"
        assert error["details"]["word_count"] == 250
        assert text_provider.call_count == 0

    @pytest.mark.asyncio
    async def test_fifty_long_words_are_accepted(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        prompt = " ".join(["internationalization-focused"] * 50)

        response = await authenticated_client.post(
            "/api/v1/profile/enhance",
            json={"profile": "Backend engineer.", "prompt": prompt},
        )

        assert response.status_code == 200
        assert response.json()["data"]["source"] == "provider-generated"
        assert text_provider.call_count == 1

    @pytest.mark.asyncio
    async def test_provider_outage_returns_503_without_internals(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        text_provider.responses = [
            ProviderError(ProviderErrorKind.TRANSPORT, "connect to 10.1.2.3:443 refused")
        ]

        response = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Backend engineer."}
        )

        assert response.status_code == 503
        error = response.json()
        assert error["error_code"] == "AI_SERVICE_UNAVAILABLE"
        assert error["message"] == "enhancement service temporarily unavailable"
        assert error["details"] is None
        assert "10.1.2.3" not in response.text
        assert text_provider.call_count == 2

    @pytest.mark.asyncio
    async def test_rate_limited_provider_is_not_retried(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        text_provider.responses = [
            ProviderError(ProviderErrorKind.RATE_LIMITED, "slow down", status_code=429)
        ]

        response = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Backend engineer."}
        )

        assert response.status_code == 503
        assert text_provider.call_count == 1

    @pytest.mark.asyncio
    async def test_does_not_modify_stored_profile(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        await authenticated_client.post("/api/v1/users/me/login")
        text_provider.responses = ["Polished."]

        await authenticated_client.post("/api/v1/profile/enhance", json={"profile": "Rough."})
        me = await authenticated_client.get("/api/v1/users/me")

        assert me.json()["data"]["bio"] is None

    @pytest.mark.asyncio
    async def test_deactivated_user_is_rejected(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        await authenticated_client.post("/api/v1/users/me/login")
        await authenticated_client.delete("/api/v1/users/me")

        response = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Backend engineer."}
        )

        assert response.status_code == 403
        assert response.json()["error_code"] == "USER_INACTIVE"
        assert text_provider.call_count == 0

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/profile/enhance", json={"profile": "Backend engineer."}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"


class TestAcceptEnhancementAPI:
    """PUT /api/v1/profile/enhanced."""

    @pytest.mark.asyncio
    async def test_saves_accepted_text(
        self, authenticated_client: AsyncClient, text_provider: FakeTextProvider
    ):
        await authenticated_client.post("/api/v1/users/me/login")
        text_provider.responses = ["Seasoned data analyst with a bias for clear dashboards."]

        enhanced = await authenticated_client.post(
            "/api/v1/profile/enhance", json={"profile": "Data analyst."}
        )
        text = enhanced.json()["data"]["enhanced_profile"]

        response = await authenticated_client.put(
            "/api/v1/profile/enhanced", json={"enhanced_profile": text}
        )

        assert response.status_code == 200
        assert response.json()["data"]["bio"] == text

    @pytest.mark.asyncio
    async def test_unknown_user_returns_404(self, authenticated_client: AsyncClient):
        response = await authenticated_client.put(
            "/api/v1/profile/enhanced", json={"enhanced_profile": "Anything."}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_empty_text_is_rejected(self, authenticated_client: AsyncClient):
        response = await authenticated_client.put(
            "/api/v1/profile/enhanced", json={"enhanced_profile": ""}
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
