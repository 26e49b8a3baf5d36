"""
stream_token_issuer.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the issuers built once in `create_app`.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from stream_token_issuer.tokens.base import TokenIssuer, TokenKind


def issuers_from_app(request: Request) -> dict[TokenKind, TokenIssuer]:
    return request.app.state.issuers  # type: ignore[attr-defined]
