"""
Pydantic schemas for chirp endpoints.

The request schema keeps ``user_id`` as a plain string so that a malformed
or absent identifier is reported by the handler as ``Invalid user_id`` rather
than as a generic decode failure. Absent fields decode as empty strings.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict

MAX_CHIRP_LENGTH = 140


class CreateChirpRequest(BaseModel):
    """
    Request body for POST /api/chirps.

    Example:
        {
            "body": "Hello, world!",
            "user_id": "50746277-23c6-4d85-a890-564c0044c2fb"
        }
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {
                "body": "Hello, world!",
                "user_id": "50746277-23c6-4d85-a890-564c0044c2fb",
            }
        ]
    })

    body: str = Field(
        default="",
        description=f"Chirp text; at most {MAX_CHIRP_LENGTH} characters after filtering",
    )
    user_id: str = Field(default="", description="Identifier (UUID) of the posting user")


class ChirpResponse(BaseModel):
    """
    Chirp record returned by the API.

    Example:
        {
            "id": "94b7e44c-3604-42e3-bef7-ebfcc3efff8f",
            "created_at": "2026-10-18T10:30:00+00:00",
            "updated_at": "2026-10-18T10:30:00+00:00",
            "body": "hello, world!",
            "user_id": "50746277-23c6-4d85-a890-564c0044c2fb"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Server-generated chirp identifier")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")
    body: str = Field(..., description="Filtered chirp body")
    user_id: UUID = Field(..., description="Identifier of the owning user")
