"""
stream_token_issuer.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the issuer, the identity gate and the API.
- Hide signing secrets from repr/logging.
- Refuse to start a production deployment that still carries a shipped dev secret.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholders are only acceptable outside prod; see `Settings._reject_dev_secrets_in_prod`.
DEV_STREAM_API_SECRET = "dev-stream-secret-change-me-not-for-prod"
DEV_IDENTITY_JWT_SECRET = "dev-identity-secret-change-me-not-for-prod"


class Settings(BaseSettings):
    """
    Process-wide configuration, loaded once at startup and treated as read-only.
    """

    # hide_input_in_errors keeps secret values out of validation error text.
    model_config = SettingsConfigDict(env_prefix="STI_", case_sensitive=False, hide_input_in_errors=True)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "stream-token-issuer"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Messaging backend credentials. The key id is public; the secret signs user tokens.
    stream_api_key: str = "h3bkh4ayyxaz"
    stream_api_secret: str = Field(default=DEV_STREAM_API_SECRET, repr=False)

    # Identity gate: upstream identity assertions are HS256 JWTs.
    identity_jwt_alg: str = "HS256"
    identity_jwt_issuer: str = "identity-gate"
    identity_jwt_audience: str = "stream-token-issuer"
    identity_jwt_secret: str = Field(default=DEV_IDENTITY_JWT_SECRET, repr=False)

    # Principals holding this role may request tokens for another subject.
    impersonation_role: str = "token_minter"

    @model_validator(mode="after")
    def _reject_dev_secrets_in_prod(self) -> Settings:
        if self.env != "prod":
            return self
        # Name the variable, never the value.
        if not self.stream_api_secret or self.stream_api_secret == DEV_STREAM_API_SECRET:
            raise ValueError("STI_STREAM_API_SECRET must be set explicitly in prod")
        if not self.identity_jwt_secret or self.identity_jwt_secret == DEV_IDENTITY_JWT_SECRET:
            raise ValueError("STI_IDENTITY_JWT_SECRET must be set explicitly in prod")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly and pass it to `create_app`; only the
# process entrypoint goes through `get_settings()`.
