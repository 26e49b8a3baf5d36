"""
tests.conftest

Shared fixtures: test settings, principals and identity assertions.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from stream_token_issuer.auth.gate import IdentityAssertionConfig, encode_identity_assertion
from stream_token_issuer.settings import Settings

STREAM_SECRET = "test-stream-secret-0123456789abcdef"
IDENTITY_SECRET = "test-identity-secret-0123456789abcdef"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        stream_api_key="test-key",
        stream_api_secret=STREAM_SECRET,
        identity_jwt_secret=IDENTITY_SECRET,
    )


@pytest.fixture
def assertion_for(settings: Settings) -> Callable[..., str]:
    cfg = IdentityAssertionConfig.from_settings(settings)

    def _make(subject: str, roles: list[str] | None = None) -> str:
        return encode_identity_assertion(cfg=cfg, subject=subject, roles=roles)

    return _make
