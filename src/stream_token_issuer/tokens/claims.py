"""
stream_token_issuer.tokens.claims

Claims carried by signed stream tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

TOKEN_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True, slots=True)
class Claims:
    subject: str
    issued_at: int
    expires_at: int

    @classmethod
    def starting_at(cls, *, subject: str, issued_at: int) -> Claims:
        return cls(subject=subject, issued_at=issued_at, expires_at=issued_at + TOKEN_TTL_SECONDS)

    def to_payload(self) -> dict[str, Any]:
        # Claim names expected by the messaging backend.
        return {
            "user_id": self.subject,
            "iat": self.issued_at,
            "exp": self.expires_at,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Claims:
        return cls(
            subject=str(payload["user_id"]),
            issued_at=int(payload["iat"]),
            expires_at=int(payload["exp"]),
        )
