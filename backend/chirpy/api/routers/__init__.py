"""
FastAPI routers for Chirpy API endpoints.

This module exports all router instances for registration in the main app.
"""

from .health import router as health_router
from .admin import router as admin_router
from .users import router as users_router
from .chirps import router as chirps_router

__all__ = [
    "health_router",
    "admin_router",
    "users_router",
    "chirps_router",
]
