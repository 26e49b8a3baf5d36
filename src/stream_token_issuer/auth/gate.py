"""
stream_token_issuer.auth.gate

Identity assertion helpers.

Responsibilities:
- Decode and validate upstream identity assertions with strict claim requirements
  (iss/aud/exp/iat/sub).
- Mint assertions for local tooling and tests, standing in for the upstream provider.
- Convert validated claims into a `Principal`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from stream_token_issuer.auth.models import Principal
from stream_token_issuer.settings import Settings


@dataclass(frozen=True, slots=True)
class IdentityAssertionConfig:
    alg: str
    issuer: str
    audience: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings) -> IdentityAssertionConfig:
        return cls(
            alg=settings.identity_jwt_alg,
            issuer=settings.identity_jwt_issuer,
            audience=settings.identity_jwt_audience,
            secret=settings.identity_jwt_secret,
        )


class IdentityAssertionError(Exception):
    pass


def encode_identity_assertion(
    *,
    cfg: IdentityAssertionConfig,
    subject: str,
    roles: list[str] | None = None,
    ttl: timedelta = timedelta(minutes=5),
) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": subject,
        "roles": roles or [],
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_identity_assertion(*, cfg: IdentityAssertionConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise IdentityAssertionError(str(e)) from e


def principal_from_claims(claims: dict[str, Any]) -> Principal:
    subject = str(claims.get("sub") or "")
    if not subject:
        raise IdentityAssertionError("empty subject")
    roles_raw = claims.get("roles", [])
    if not isinstance(roles_raw, list):
        raise IdentityAssertionError("roles must be a list")
    return Principal(subject=subject, roles=frozenset(str(r) for r in roles_raw))
