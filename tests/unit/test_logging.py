"""Unit tests for the log masking processor."""

from core.logging import mask_sensitive_values


def test_masks_credential_keys():
    event = {
        "event": "provider_configured",
        "api_key": "sk-live-123",
        "openai_api_key": "sk-live-456",
        "Authorization": "Bearer abc",
        "model": "gpt-4o-mini",
    }

    result = mask_sensitive_values(None, "info", event)

    assert result["api_key"] == "***MASKED***"
    assert result["openai_api_key"] == "***MASKED***"
    assert result["Authorization"] == "***MASKED***"
    assert result["model"] == "gpt-4o-mini"
    assert result["event"] == "provider_configured"


def test_leaves_lookalike_keys_alone():
    result = mask_sensitive_values(None, "info", {"token_count": 12, "secretary": "Bo"})

    assert result == {"token_count": 12, "secretary": "Bo"}
