"""
stream_token_issuer.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) reporting which issuers this deployment built.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from stream_token_issuer.api.deps import issuers_from_app
from stream_token_issuer.tokens.base import TokenIssuer, TokenKind

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    issuers: dict[TokenKind, TokenIssuer] = Depends(issuers_from_app),
) -> dict[str, Any]:
    # The signed issuer is always built; the dev issuer depends on the deployment.
    return {"status": "ready", "issuers": sorted(kind.value for kind in issuers)}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.
