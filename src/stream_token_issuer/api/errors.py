"""
stream_token_issuer.api.errors

Translation of issuance errors into the callable error envelope.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stream_token_issuer.observability.logging import get_logger
from stream_token_issuer.tokens.errors import TokenIssuanceError

log = get_logger(__name__)


async def token_issuance_error_handler(_: Request, exc: TokenIssuanceError) -> JSONResponse:
    log.info("token_request_failed", status=exc.status)
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": {"status": exc.status, "message": exc.message}},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TokenIssuanceError, token_issuance_error_handler)
