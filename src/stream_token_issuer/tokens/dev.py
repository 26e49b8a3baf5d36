"""
stream_token_issuer.tokens.dev

Development tokens: a truncated SHA-256 digest, no signature and no expiry.
Lets local clients connect without holding the real signing secret. Never built on prod.
"""

from __future__ import annotations

import hashlib
import time

from stream_token_issuer.tokens.base import Clock, IssuedToken, TokenIssuer, TokenKind

DIGEST_HEX_CHARS = 32
DEV_TOKEN_NOTE = "This is a development token. Use the signed stream token endpoint for production."


class DevTokenIssuer(TokenIssuer):
    kind = TokenKind.DEV

    def __init__(self, *, api_key: str, impersonation_role: str, clock: Clock = time.time) -> None:
        super().__init__(impersonation_role=impersonation_role, clock=clock)
        self._api_key = api_key

    def _mint(self, subject: str) -> IssuedToken:
        now = self._clock()
        message = f"{self._api_key}{subject}{int(now * 1000)}"
        digest = hashlib.sha256(message.encode("utf-8")).hexdigest()
        return IssuedToken(
            token=f"{subject}_{digest[:DIGEST_HEX_CHARS]}",
            subject=subject,
            issued_at=int(now),
            note=DEV_TOKEN_NOTE,
        )
