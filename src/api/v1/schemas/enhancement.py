"""Pydantic schemas for the profile enhancement API."""

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.enhancement import EnhancementSource


class EnhanceRequest(BaseModel):
    """Body of an enhancement request.

    Emptiness and the prompt word limit are checked by the enhancement
    validator so they surface as ``EMPTY_PROFILE`` / ``PROMPT_TOO_LONG``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profile": "Backend engineer.",
                "prompt": "make it more senior-sounding",
            }
        },
    )

    profile: str | None = Field(None, max_length=20000)
    prompt: str | None = Field(None, max_length=10000)


class EnhancementResponse(BaseModel):
    """Schema for an enhancement result."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "enhanced_profile": (
                    "Senior backend engineer with 5+ years of distributed systems experience."
                ),
                "source": "provider-generated",
                "changed": True,
            }
        },
    )

    enhanced_profile: str
    source: EnhancementSource
    changed: bool


class EnhancementDetailResponse(BaseModel):
    """Wrapper for a single enhancement result."""

    data: EnhancementResponse


class AcceptEnhancementRequest(BaseModel):
    """Persist an enhanced profile the user accepted."""

    enhanced_profile: str = Field(..., min_length=1, max_length=20000)
