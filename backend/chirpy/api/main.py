"""
Chirpy FastAPI application entry point.

This module creates and configures the FastAPI application with:
- Router registration for all endpoints
- Static fileserver mount with hit counting
- Middleware for CORS and request logging
- Exception handlers rendering ``{"error": ...}`` bodies
- Lifespan events for startup and shutdown

Usage:
    # Development mode (with auto-reload)
    python -m backend.chirpy.api.main

    # Or using uvicorn directly
    uvicorn backend.chirpy.api.main:app --reload --host 0.0.0.0 --port 8080
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from config/.env or .env
for env_path in (
    Path(__file__).parent.parent.parent.parent / 'config' / '.env',
    Path.cwd() / '.env',
):
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

from backend.chirpy.api.routers import (
    health_router,
    admin_router,
    users_router,
    chirps_router,
)
from backend.chirpy.api.middleware import (
    configure_cors,
    MetricsMiddleware,
    RequestLoggingMiddleware,
)
from backend.chirpy.api.services.metrics import HitCounter
from backend.chirpy.core.data.database import ChirpyDatabase
from backend.chirpy.core.data.gateway import ChirpGateway
from backend.chirpy.core.exceptions import PersistenceError
from backend.chirpy.core.utils.config import ChirpyConfig

__version__ = "0.1.0"

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup:
        - Open the database unless a gateway was injected
        - Log configuration

    Shutdown:
        - Log shutdown message
    """
    config: ChirpyConfig = app.state.config

    logger.info("=" * 60)
    logger.info("Starting Chirpy API")
    logger.info("=" * 60)

    try:
        if app.state.gateway is None:
            db_url = config.db_url
            logger.info("Initializing database...")
            app.state.gateway = ChirpyDatabase(db_url)
            logger.info(f"Database ready at {app.state.gateway.db_path}")

        api_host = config.get("api.host", "0.0.0.0")
        api_port = config.get("api.port", 8080)
        logger.info(f"Platform: {app.state.platform}")
        logger.info(f"API server: {api_host}:{api_port}")
        logger.info("=" * 60)
        logger.info("Chirpy API is ready!")
        logger.info("=" * 60)
    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        raise

    yield

    logger.info("Shutting down Chirpy API")


def create_app(
    config: Optional[ChirpyConfig] = None,
    gateway: Optional[ChirpGateway] = None,
    counter: Optional[HitCounter] = None,
) -> FastAPI:
    """
    Build a Chirpy application.

    Collaborators are injected so tests can build isolated apps; anything
    left out is created from configuration (the database at startup).

    Args:
        config: Configuration; the default search locations are used if None.
        gateway: Persistence gateway; a ChirpyDatabase is opened at startup if None.
        counter: Fileserver hit counter; a fresh one is created if None.

    Returns:
        FastAPI: Configured application.

    Example:
        >>> app = create_app(gateway=ChirpyDatabase("data/test.db"))
    """
    config = config or ChirpyConfig()
    counter = counter or HitCounter()

    app = FastAPI(
        title="Chirpy API",
        version=__version__,
        description="""
        Chirpy REST API for short text posts.

        ## Features

        * **Users**: Create accounts by email
        * **Chirps**: Post, list and fetch chirps (profanity is masked)
        * **Admin**: Fileserver hit report and reset
        """,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "users", "description": "User accounts"},
            {"name": "chirps", "description": "Posting and reading chirps"},
            {"name": "admin", "description": "Fileserver metrics"},
            {"name": "health", "description": "Readiness probe"},
        ],
    )

    app.state.config = config
    app.state.gateway = gateway
    app.state.hit_counter = counter
    app.state.platform = config.platform

    configure_cors(app, config)

    # Order matters: last added = first executed
    static_prefix = config.get("app.static_prefix", "/app")
    app.add_middleware(MetricsMiddleware, counter=counter, prefix=static_prefix)
    app.add_middleware(RequestLoggingMiddleware, config=config)

    app.include_router(health_router)
    app.include_router(admin_router)
    app.include_router(users_router)
    app.include_router(chirps_router)

    filepath_root = config.get("app.filepath_root", ".")
    app.mount(static_prefix, StaticFiles(directory=filepath_root, html=True), name="app")
    logger.info(f"Serving files from {filepath_root} at {static_prefix}/")

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers that render every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions raised by handlers, routing and static files."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Handle request decoding errors.

        Malformed JSON, a non-object body and non-string fields are all
        reported as a 400 invalid JSON error. Absent fields default to "".
        """
        logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid JSON"},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        """Handle database failures not mapped by a handler; detail is logged only."""
        logger.error(f"Persistence error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions; detail is logged only."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = app.state.config
    host = config.get("api.host", "0.0.0.0")
    port = config.get("api.port", 8080)
    reload = config.get("api.reload", False)
    workers = config.get("api.workers", 1)
    log_level = config.get("api.log_level", "info")

    uvicorn.run(
        "backend.chirpy.api.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1,  # Workers can't be used with reload
        log_level=log_level,
    )
