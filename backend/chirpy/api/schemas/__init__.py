"""
Pydantic schemas for Chirpy API request/response validation.

This module exports all schema classes for easy importing throughout the API.
"""

from .common import ErrorResponse
from .users import CreateUserRequest, UserResponse
from .chirps import CreateChirpRequest, ChirpResponse, MAX_CHIRP_LENGTH

__all__ = [
    "ErrorResponse",
    "CreateUserRequest",
    "UserResponse",
    "CreateChirpRequest",
    "ChirpResponse",
    "MAX_CHIRP_LENGTH",
]
