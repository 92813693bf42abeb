"""
FastAPI dependency injection functions for the Chirpy API.

The application factory stores the configuration, the persistence gateway
and the hit counter on ``app.state``; these dependencies hand them to route
handlers so tests can build isolated apps with their own collaborators.

Example:
    @router.get("/api/chirps")
    def list_chirps(gateway: ChirpGateway = Depends(get_gateway)):
        return gateway.list_chirps()
"""

from fastapi import Request

from backend.chirpy.api.services.metrics import HitCounter
from backend.chirpy.core.data.gateway import ChirpGateway


def get_gateway(request: Request) -> ChirpGateway:
    """
    Get the persistence gateway shared by all requests.

    Args:
        request: Current request (injected by FastAPI).

    Returns:
        ChirpGateway: Gateway for reading and writing users and chirps.
    """
    return request.app.state.gateway


def get_hit_counter(request: Request) -> HitCounter:
    """
    Get the fileserver hit counter.

    Args:
        request: Current request (injected by FastAPI).

    Returns:
        HitCounter: Shared request counter.
    """
    return request.app.state.hit_counter


def get_platform(request: Request) -> str:
    """Get the platform name ("dev", "production", ...) the app runs on."""
    return request.app.state.platform
