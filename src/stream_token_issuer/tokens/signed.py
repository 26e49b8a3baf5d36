"""
stream_token_issuer.tokens.signed

Signed stream tokens (production path).

Responsibilities:
- Sign claims with the messaging backend secret (HS256, explicit JWT header).
- Collapse any signing failure into `InternalIssuanceError`; the cause is only logged.
- Verify tokens on behalf of the backend side and tests.
"""

from __future__ import annotations

import time

import jwt

from stream_token_issuer.observability.logging import get_logger
from stream_token_issuer.tokens.base import Clock, IssuedToken, TokenIssuer, TokenKind
from stream_token_issuer.tokens.claims import Claims
from stream_token_issuer.tokens.errors import InternalIssuanceError

log = get_logger(__name__)

ALGORITHM = "HS256"
HEADERS = {"alg": ALGORITHM, "typ": "JWT"}


class SignedTokenIssuer(TokenIssuer):
    kind = TokenKind.SIGNED

    def __init__(self, *, secret: str, impersonation_role: str, clock: Clock = time.time) -> None:
        super().__init__(impersonation_role=impersonation_role, clock=clock)
        self._secret = secret

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r})"

    def _mint(self, subject: str) -> IssuedToken:
        try:
            claims = Claims.starting_at(subject=subject, issued_at=int(self._clock()))
            token = jwt.encode(claims.to_payload(), self._secret, algorithm=ALGORITHM, headers=HEADERS)
        except Exception as e:
            log.exception("token_signing_failed", subject=subject, error_type=type(e).__name__)
            raise InternalIssuanceError() from e

        return IssuedToken(
            token=token,
            subject=claims.subject,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )


def decode_signed_token(token: str, secret: str, *, verify_exp: bool = True) -> Claims:
    payload = jwt.decode(
        token,
        secret,
        algorithms=[ALGORITHM],
        options={
            "require": ["user_id", "iat", "exp"],
            "verify_exp": verify_exp,
        },
    )
    return Claims.from_payload(payload)


# --- Module Notes -----------------------------------------------------------
# `decode_signed_token` raises `jwt.InvalidTokenError` subclasses (bad signature,
# expired, missing claim); callers decide how to surface them.
