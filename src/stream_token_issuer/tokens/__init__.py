"""
stream_token_issuer.tokens

Token issuance core.

Responsibilities:
- Claims model with a fixed validity window.
- Issuance strategies (signed JWT, development digest) behind one interface.
- Strategy selection by deployment mode.
"""

from stream_token_issuer.tokens.base import IssuedToken, TokenIssuer, TokenKind
from stream_token_issuer.tokens.claims import TOKEN_TTL_SECONDS, Claims
from stream_token_issuer.tokens.errors import (
    InternalIssuanceError,
    InvalidRequestError,
    SubjectOverrideDeniedError,
    TokenIssuanceError,
    UnauthenticatedError,
)

__all__ = [
    "TOKEN_TTL_SECONDS",
    "Claims",
    "InternalIssuanceError",
    "InvalidRequestError",
    "IssuedToken",
    "SubjectOverrideDeniedError",
    "TokenIssuanceError",
    "TokenIssuer",
    "TokenKind",
    "UnauthenticatedError",
]
