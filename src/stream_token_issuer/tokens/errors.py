"""
stream_token_issuer.tokens.errors

Domain errors raised by the token issuers.

Responsibilities:
- Carry a coarse callable status and a fixed caller-facing message.
- Keep underlying causes out of anything returned to the caller.
"""

from __future__ import annotations


class TokenIssuanceError(Exception):
    status: str = "INTERNAL"
    http_status: int = 500
    message: str = "Failed to generate authentication token."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnauthenticatedError(TokenIssuanceError):
    status = "UNAUTHENTICATED"
    http_status = 401
    message = "User must be authenticated to generate tokens."


class SubjectOverrideDeniedError(TokenIssuanceError):
    status = "PERMISSION_DENIED"
    http_status = 403
    message = "Not allowed to issue tokens for another user."


class InvalidRequestError(TokenIssuanceError):
    status = "INVALID_ARGUMENT"
    http_status = 400
    message = "Invalid request payload."


class InternalIssuanceError(TokenIssuanceError):
    pass


# --- Module Notes -----------------------------------------------------------
# The API layer renders these as {"error": {"status", "message"}}; see
# `stream_token_issuer.api.errors`.
