"""Entry-point for the form ingest ASGI app.

This module constructs the FastAPI instance, wires global middleware,
registers the route groups, and exposes the `app` variable that uvicorn
imports (``uvicorn form_ingest.main:app``).
"""

from __future__ import annotations

import os
import logging
import traceback
from contextlib import asynccontextmanager
from time import perf_counter
from typing import AsyncIterator, Callable, Awaitable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from form_ingest.models import HealthResponse
from form_ingest.settings import Settings, load_settings
from form_ingest.utils.database import ClientFactory, SubmissionStore, create_mongo_client
from form_ingest.utils.errors import AuthenticationError, authentication_error_handler
from form_ingest.utils.logger import configure_logging, logger, request_id_ctx


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach request-level context vars for structured logging."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:  # type: ignore[override]
        start = perf_counter()
        request_id = request.headers.get("X-Request-Id", os.urandom(4).hex())
        token = request_id_ctx.set(request_id)
        response: Response | None = None
        try:
            response = await call_next(request)
        finally:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "request.complete",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code if response is not None else 500,
                    "duration_ms": round(duration_ms, 2),
                    "request_id": request_id,
                },
            )
            request_id_ctx.reset(token)
        return response


def create_app(
    settings: Settings | None = None,
    *,
    client_factory: ClientFactory = create_mongo_client,
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    if not settings.api_key:
        logger.warning("auth.api_key_not_configured", extra={"effect": "all requests rejected"})

    store = SubmissionStore(settings, client_factory=client_factory)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        await store.open()
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(
        title="Form Ingest API",
        version="0.1.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Global middleware
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(AuthenticationError, authentication_error_handler)

    # Global exception handler - logs full tracebacks for any unhandled 500s
    @app.exception_handler(Exception)
    async def log_unhandled_exceptions(request: Request, exc: Exception):
        """Log full traceback for any unhandled exception that would become a 500."""
        error_logger = logging.getLogger("uvicorn.error")
        error_logger.error(
            "UNHANDLED %s at %s %s\n%s",
            type(exc).__name__,
            request.method,
            request.url.path,
            "".join(traceback.format_tb(exc.__traceback__))
        )
        # Re-raise so the server still returns a 500
        raise exc

    # Health check
    @app.get("/", response_model=HealthResponse)
    async def root() -> HealthResponse:  # pylint: disable=unused-variable
        return HealthResponse()

    from form_ingest.routers import forms_routes  # noqa: WPS433 (runtime import)

    app.include_router(forms_routes.router)

    return app


# The object uvicorn imports
app = create_app()
