"""
stream_token_issuer.auth.deps

FastAPI dependency functions for the identity gate.

Responsibilities:
- Convert an optional bearer assertion into an optional `Principal`.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stream_token_issuer.auth.gate import (
    IdentityAssertionConfig,
    IdentityAssertionError,
    decode_identity_assertion,
    principal_from_claims,
)
from stream_token_issuer.auth.models import Principal
from stream_token_issuer.observability.logging import get_logger

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_optional_principal(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Principal | None:
    if creds is None or not creds.credentials:
        return None

    # Settings are injected into app.state by `create_app`.
    settings = request.app.state.settings

    try:
        claims = decode_identity_assertion(
            cfg=IdentityAssertionConfig.from_settings(settings),
            token=creds.credentials,
        )
        return principal_from_claims(claims)
    except IdentityAssertionError as e:
        # The issuer turns a missing principal into UNAUTHENTICATED.
        log.info("identity_rejected", reason=str(e))
        return None


# --- Module Notes -----------------------------------------------------------
# `HTTPBearer(auto_error=False)` keeps FastAPI from answering 403 on a missing
# header, so unauthenticated calls reach the callable error envelope instead.
