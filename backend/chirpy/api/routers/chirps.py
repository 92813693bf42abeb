"""
FastAPI router for chirp endpoints.

This module provides HTTP endpoints for posting chirps, listing every chirp
and fetching one chirp by identifier. Bodies pass through the content filter
before the length check and before they reach the database.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from backend.chirpy.api.dependencies import get_gateway
from backend.chirpy.api.schemas import (
    ChirpResponse,
    CreateChirpRequest,
    ErrorResponse,
    MAX_CHIRP_LENGTH,
)
from backend.chirpy.core.data.gateway import ChirpGateway
from backend.chirpy.core.exceptions import PersistenceError
from backend.chirpy.services.moderation.content_filter import clean_body

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/chirps",
    tags=["chirps"],
    responses={
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.post(
    "",
    response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a chirp",
    responses={400: {"model": ErrorResponse, "description": "Invalid request"}},
)
def create_chirp(
    request: CreateChirpRequest,
    gateway: ChirpGateway = Depends(get_gateway),
) -> ChirpResponse:
    """
    Filter, validate and store a chirp.

    Args:
        request: Decoded request body.
        gateway: Persistence gateway (injected dependency).

    Returns:
        ChirpResponse with the stored record.

    Raises:
        HTTPException: 400 if the filtered body is too long or user_id is
            not a UUID, 500 if the chirp could not be stored.

    Example:
        POST /api/chirps
        {
            "body": "This is a kerfuffle opinion I need to share with the world",
            "user_id": "50746277-23c6-4d85-a890-564c0044c2fb"
        }

        Response (201):
        {
            "id": "94b7e44c-3604-42e3-bef7-ebfcc3efff8f",
            "created_at": "2026-10-18T10:30:00+00:00",
            "updated_at": "2026-10-18T10:30:00+00:00",
            "body": "this is a **** opinion i need to share with the world",
            "user_id": "50746277-23c6-4d85-a890-564c0044c2fb"
        }
    """
    body = clean_body(request.body)

    if len(body) > MAX_CHIRP_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Chirp is too long",
        )

    try:
        user_id = UUID(request.user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid user_id",
        )

    try:
        chirp = gateway.create_chirp(body, user_id)
    except PersistenceError as e:
        logger.error(f"Failed to create chirp for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't create chirp",
        )

    logger.info(f"Created chirp {chirp.id} for user {user_id}")
    return ChirpResponse.model_validate(chirp)


@router.get(
    "",
    response_model=List[ChirpResponse],
    summary="List chirps",
    description="Every chirp, oldest first. There is no pagination.",
)
def list_chirps(gateway: ChirpGateway = Depends(get_gateway)) -> List[ChirpResponse]:
    try:
        chirps = gateway.list_chirps()
    except PersistenceError as e:
        logger.error(f"Failed to list chirps: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't retrieve chirps",
        )
    return [ChirpResponse.model_validate(chirp) for chirp in chirps]


@router.get(
    "/{chirp_id}",
    response_model=ChirpResponse,
    summary="Get a chirp",
    responses={404: {"model": ErrorResponse, "description": "Chirp not found"}},
)
def get_chirp(
    chirp_id: str,
    gateway: ChirpGateway = Depends(get_gateway),
) -> ChirpResponse:
    """
    Fetch one chirp by identifier.

    A malformed identifier cannot name any chirp, so it is reported as 404
    like an unknown one.

    Args:
        chirp_id: Chirp identifier from the path.
        gateway: Persistence gateway (injected dependency).

    Returns:
        ChirpResponse for the chirp.

    Raises:
        HTTPException: 404 if the id is malformed or unknown, 500 if the
            lookup failed.
    """
    try:
        parsed_id = UUID(chirp_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invalid chirp id",
        )

    try:
        chirp = gateway.get_chirp(parsed_id)
    except PersistenceError as e:
        logger.error(f"Failed to fetch chirp {parsed_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Couldn't retrieve chirp",
        )

    if chirp is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chirp not found",
        )
    return ChirpResponse.model_validate(chirp)
