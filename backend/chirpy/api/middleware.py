"""
FastAPI middleware for CORS, request logging and fileserver metrics.

This module provides configurable middleware for:
- CORS configuration for frontend access
- Request/response logging with request IDs
- Counting hits on the static fileserver routes
"""

import time
import uuid
import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from backend.chirpy.api.services.metrics import HitCounter
from backend.chirpy.core.utils.config import ChirpyConfig

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Fileserver hit counting middleware.

    Increments the shared HitCounter once for every request whose path falls
    under the static prefix, before the request is forwarded. Other routes
    pass through untouched.
    """

    def __init__(self, app, counter: HitCounter, prefix: str = "/app"):
        """
        Initialize metrics middleware.

        Args:
            app: ASGI application to wrap.
            counter: Shared hit counter.
            prefix: Path prefix of the static fileserver mount.
        """
        super().__init__(app)
        self.counter = counter
        self.prefix = prefix.rstrip("/")

    def _is_static(self, path: str) -> bool:
        # The bare prefix only redirects to prefix + "/", which is counted
        return path.startswith(self.prefix + "/")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if self._is_static(request.url.path):
            hits = self.counter.increment()
            logger.debug(f"Fileserver hit #{hits}: {request.url.path}")
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request/response logging middleware.

    Logs all incoming requests with:
    - Request ID (UUID for tracing)
    - Method and path
    - Client IP
    - Response status code
    - Processing time
    """

    def __init__(self, app, config: ChirpyConfig):
        """
        Initialize logging middleware.

        Args:
            app: FastAPI application instance.
            config: ChirpyConfig for reading the request log level.
        """
        super().__init__(app)
        self.config = config
        level_name = str(config.get("api.log_level", "info")).upper()
        self.log_level = getattr(logging, level_name, logging.INFO)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in chain.

        Returns:
            Response from next handler with added request ID header.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            self.log_level,
            f"[{request_id}] {request.method} {request.url.path} - Client: {client_ip}"
        )

        start_time = time.time()
        response = await call_next(request)
        processing_time = time.time() - start_time

        logger.log(
            self.log_level,
            f"[{request_id}] {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Time: {processing_time:.3f}s"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.3f}"

        return response


def configure_cors(app, config: ChirpyConfig) -> None:
    """
    Configure CORS middleware for FastAPI app.

    Reads CORS settings from config and adds CORSMiddleware to app.

    Args:
        app: FastAPI application instance.
        config: ChirpyConfig for reading CORS configuration.
    """
    allowed_origins = config.get("api.cors.allowed_origins", ["http://localhost:3000"])
    allow_credentials = config.get("api.cors.allow_credentials", True)
    allowed_methods = config.get("api.cors.allowed_methods", ["*"])
    allowed_headers = config.get("api.cors.allowed_headers", ["*"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allow_credentials,
        allow_methods=allowed_methods,
        allow_headers=allowed_headers,
    )

    logger.info(f"CORS configured with origins: {allowed_origins}")
