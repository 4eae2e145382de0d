"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "PROMPT_TOO_LONG",
                "message": "prompt exceeds 50 words",
                "details": {"field": "prompt", "word_count": 64, "max_words": 50},
            }
        },
    )

    error_code: str
    message: str
    details: Any | None = None
