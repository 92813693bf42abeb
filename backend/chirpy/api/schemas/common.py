"""
Common Pydantic schemas used across the Chirpy API.

All schemas use Pydantic v2 syntax.
"""

from pydantic import BaseModel, Field, ConfigDict


class ErrorResponse(BaseModel):
    """
    Error response schema.

    Every failing request, whatever its status code, carries a single
    human-readable message.

    Example:
        {"error": "Chirp is too long"}
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {"error": "Chirp is too long"},
            {"error": "Invalid user_id"},
        ]
    })

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid JSON", "Chirp not found"]
    )
