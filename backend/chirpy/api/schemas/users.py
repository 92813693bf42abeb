"""
Pydantic schemas for user endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict


class CreateUserRequest(BaseModel):
    """
    Request body for POST /api/users.

    The email is stored as given (empty when absent); uniqueness is enforced by the database.
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [{"email": "saul@bettercall.com"}]
    })

    email: str = Field(default="", description="Email address of the new user")


class UserResponse(BaseModel):
    """
    User record returned by the API.

    Example:
        {
            "id": "50746277-23c6-4d85-a890-564c0044c2fb",
            "created_at": "2026-10-18T10:30:00+00:00",
            "updated_at": "2026-10-18T10:30:00+00:00",
            "email": "saul@bettercall.com"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Server-generated user identifier")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")
    email: str = Field(..., description="Email address")
