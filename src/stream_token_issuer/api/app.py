"""
stream_token_issuer.api.app

FastAPI app factory for the Stream Token Issuer service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Construct the token issuers once from the injected settings.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

import time

from fastapi import FastAPI

from stream_token_issuer import __version__
from stream_token_issuer.api.errors import register_error_handlers
from stream_token_issuer.api.routers.health import router as health_router
from stream_token_issuer.api.routers.tokens import router as tokens_router
from stream_token_issuer.observability.logging import configure_logging, get_logger
from stream_token_issuer.observability.middleware import RequestContextMiddleware
from stream_token_issuer.settings import Settings
from stream_token_issuer.tokens.base import Clock
from stream_token_issuer.tokens.factory import build_issuers

log = get_logger(__name__)


def create_app(*, settings: Settings, clock: Clock = time.time) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Stream Token Issuer",
        version=__version__,
        docs_url=None if settings.env == "prod" else "/docs",
        openapi_url=None if settings.env == "prod" else "/openapi.json",
    )

    # Issuers are immutable and shared by all requests; settings are read-only from here on.
    app.state.settings = settings
    app.state.issuers = build_issuers(settings, clock=clock)

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(tokens_router)

    log.info(
        "app_created",
        env=settings.env,
        issuers=sorted(kind.value for kind in app.state.issuers),
    )
    return app


# --- Module Notes -----------------------------------------------------------
# Nothing here touches the network at startup, so tests can drive the app through
# httpx.ASGITransport without running lifespan events.
