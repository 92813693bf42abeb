"""
FastAPI router for the admin metrics surface.

This module reports and resets the fileserver hit counter. On the ``dev``
platform a reset also wipes every user and their chirps, giving a clean
database between manual test runs.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from backend.chirpy.api.dependencies import get_gateway, get_hit_counter, get_platform
from backend.chirpy.api.services.metrics import HitCounter
from backend.chirpy.core.data.gateway import ChirpGateway

logger = logging.getLogger(__name__)

DEV_PLATFORM = "dev"

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)


@router.get(
    "/metrics",
    response_class=HTMLResponse,
    summary="Fileserver hit report",
    description="HTML page showing how many times the `/app` fileserver was hit.",
)
def metrics_report(counter: HitCounter = Depends(get_hit_counter)) -> str:
    """
    Render the hit counter into the admin page.

    Args:
        counter: Shared hit counter (injected dependency).

    Returns:
        HTML document embedding the current count.
    """
    return METRICS_TEMPLATE.format(hits=counter.read())


@router.post(
    "/reset",
    response_class=PlainTextResponse,
    summary="Reset metrics",
    description="""
    Reset the fileserver hit counter to zero.

    When the service runs on the `dev` platform, every user (and, by
    cascade, every chirp) is deleted as well.
    """,
)
def metrics_reset(
    counter: HitCounter = Depends(get_hit_counter),
    gateway: ChirpGateway = Depends(get_gateway),
    platform: str = Depends(get_platform),
) -> str:
    """
    Reset the hit counter, and on dev the stored users.

    Args:
        counter: Shared hit counter (injected dependency).
        gateway: Persistence gateway (injected dependency).
        platform: Platform the service runs on (injected dependency).

    Returns:
        Plaintext confirmation.
    """
    counter.reset()
    if platform == DEV_PLATFORM:
        deleted = gateway.delete_all_users()
        logger.warning(f"Dev reset removed {deleted} users and their chirps")
    return "Hits reset to 0"
