"""
stream_token_issuer.tokens.factory

Issuer construction by deployment mode.

Responsibilities:
- Build the signed issuer from the configured secret.
- Build the dev issuer only outside prod, so the dev path cannot exist there.
"""

from __future__ import annotations

import time

from stream_token_issuer.settings import Settings
from stream_token_issuer.tokens.base import Clock, TokenIssuer, TokenKind
from stream_token_issuer.tokens.dev import DevTokenIssuer
from stream_token_issuer.tokens.signed import SignedTokenIssuer


def build_issuers(settings: Settings, *, clock: Clock = time.time) -> dict[TokenKind, TokenIssuer]:
    issuers: dict[TokenKind, TokenIssuer] = {
        TokenKind.SIGNED: SignedTokenIssuer(
            secret=settings.stream_api_secret,
            impersonation_role=settings.impersonation_role,
            clock=clock,
        ),
    }
    if settings.env != "prod":
        issuers[TokenKind.DEV] = DevTokenIssuer(
            api_key=settings.stream_api_key,
            impersonation_role=settings.impersonation_role,
            clock=clock,
        )
    return issuers
