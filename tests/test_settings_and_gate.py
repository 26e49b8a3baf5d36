"""
tests.test_settings_and_gate

Settings validation, identity assertion decoding and log redaction.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from stream_token_issuer.auth.gate import (
    IdentityAssertionConfig,
    IdentityAssertionError,
    decode_identity_assertion,
    encode_identity_assertion,
    principal_from_claims,
)
from stream_token_issuer.observability.logging import REDACTED, redact_sensitive
from stream_token_issuer.settings import DEV_IDENTITY_JWT_SECRET, DEV_STREAM_API_SECRET, Settings

PROD_SECRETS = {
    "stream_api_secret": "prod-stream-secret-0123456789abcdef",
    "identity_jwt_secret": "prod-identity-secret-0123456789abcdef",
}


def test_prod_accepts_explicit_secrets() -> None:
    s = Settings(env="prod", **PROD_SECRETS)
    assert s.env == "prod"


@pytest.mark.parametrize(
    "overrides",
    [
        {"stream_api_secret": DEV_STREAM_API_SECRET},
        {"stream_api_secret": ""},
        {"identity_jwt_secret": DEV_IDENTITY_JWT_SECRET},
        {"identity_jwt_secret": ""},
    ],
)
def test_prod_rejects_shipped_or_empty_secrets(overrides: dict[str, str]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Settings(env="prod", **{**PROD_SECRETS, **overrides})
    assert PROD_SECRETS["stream_api_secret"] not in str(exc_info.value)


def test_dev_tolerates_default_secrets() -> None:
    assert Settings(env="dev").stream_api_secret == DEV_STREAM_API_SECRET


def test_settings_repr_hides_secrets() -> None:
    s = Settings(env="prod", **PROD_SECRETS)
    assert PROD_SECRETS["stream_api_secret"] not in repr(s)
    assert PROD_SECRETS["identity_jwt_secret"] not in repr(s)


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STI_STREAM_API_KEY", "from-env")
    monkeypatch.setenv("STI_IMPERSONATION_ROLE", "backend")
    s = Settings()
    assert s.stream_api_key == "from-env"
    assert s.impersonation_role == "backend"


def test_identity_assertion_round_trip(settings: Settings) -> None:
    cfg = IdentityAssertionConfig.from_settings(settings)
    token = encode_identity_assertion(cfg=cfg, subject="user_42", roles=["token_minter"])

    principal = principal_from_claims(decode_identity_assertion(cfg=cfg, token=token))
    assert principal.subject == "user_42"
    assert principal.has_role("token_minter")


def test_identity_assertion_rejects_wrong_audience(settings: Settings) -> None:
    cfg = IdentityAssertionConfig.from_settings(settings)
    other = IdentityAssertionConfig(
        alg=cfg.alg, issuer=cfg.issuer, audience="someone-else", secret=cfg.secret
    )
    token = encode_identity_assertion(cfg=other, subject="user_42")

    with pytest.raises(IdentityAssertionError):
        decode_identity_assertion(cfg=cfg, token=token)


def test_identity_assertion_rejects_expired(settings: Settings) -> None:
    cfg = IdentityAssertionConfig.from_settings(settings)
    token = encode_identity_assertion(cfg=cfg, subject="user_42", ttl=timedelta(seconds=-30))

    with pytest.raises(IdentityAssertionError):
        decode_identity_assertion(cfg=cfg, token=token)


@pytest.mark.parametrize("claims", [{"sub": ""}, {"sub": "u", "roles": "admin"}])
def test_principal_from_malformed_claims(claims: dict) -> None:
    with pytest.raises(IdentityAssertionError):
        principal_from_claims(claims)


def test_redaction_masks_credentials_only() -> None:
    event = {
        "event": "token_issued",
        "token": "abc",
        "stream_api_secret": "s3cret",
        "authorization": "Bearer x",
        "token_kind": "signed",
        "subject": "user_42",
    }
    out = redact_sensitive(None, "info", dict(event))

    assert out["token"] == REDACTED
    assert out["stream_api_secret"] == REDACTED
    assert out["authorization"] == REDACTED
    assert out["token_kind"] == "signed"
    assert out["subject"] == "user_42"
    assert out["event"] == "token_issued"
