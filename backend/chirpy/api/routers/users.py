"""
FastAPI router for user endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from backend.chirpy.api.dependencies import get_gateway
from backend.chirpy.api.schemas import CreateUserRequest, ErrorResponse, UserResponse
from backend.chirpy.core.data.gateway import ChirpGateway
from backend.chirpy.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
def create_user(
    request: CreateUserRequest,
    gateway: ChirpGateway = Depends(get_gateway),
) -> UserResponse:
    """
    Create a user from an email address.

    Args:
        request: Decoded request body.
        gateway: Persistence gateway (injected dependency).

    Returns:
        UserResponse with the stored record.

    Raises:
        HTTPException: 500 if the user could not be stored.

    Example:
        POST /api/users
        {"email": "saul@bettercall.com"}

        Response (201):
        {
            "id": "50746277-23c6-4d85-a890-564c0044c2fb",
            "created_at": "2026-10-18T10:30:00+00:00",
            "updated_at": "2026-10-18T10:30:00+00:00",
            "email": "saul@bettercall.com"
        }
    """
    try:
        user = gateway.create_user(request.email)
    except PersistenceError as e:
        logger.error(f"Failed to create user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't create user",
        )

    logger.info(f"Created user {user.id}")
    return UserResponse.model_validate(user)
