"""
FastAPI router for the readiness endpoint.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(
    tags=["health"],
    responses={
        200: {"description": "Service is ready"},
    },
)


@router.get(
    "/api/healthz",
    response_class=PlainTextResponse,
    summary="Readiness probe",
    description="Returns a plaintext `OK` while the service is running.",
)
async def readiness() -> str:
    """
    Readiness probe for container orchestration.

    Example:
        GET /api/healthz

        Response (text/plain):
        OK
    """
    return "OK"
