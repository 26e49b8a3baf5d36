"""
stream_token_issuer.tokens.base

Common issuer interface.

Responsibilities:
- Enforce the unauthenticated precondition before any strategy code runs.
- Resolve the token subject (default to the principal, gated impersonation).
- Define the result object returned by every strategy.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from stream_token_issuer.auth.models import Principal
from stream_token_issuer.observability.logging import get_logger
from stream_token_issuer.tokens.errors import SubjectOverrideDeniedError, UnauthenticatedError

log = get_logger(__name__)

Clock = Callable[[], float]


class TokenKind(StrEnum):
    SIGNED = "signed"
    DEV = "dev"


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    subject: str
    issued_at: int
    # Only the signed strategy bounds validity; dev tokens carry a note instead.
    expires_at: int | None = None
    note: str | None = None


class TokenIssuer(ABC):
    """
    Stateless issuer. `issue` is the only entry point; strategies implement `_mint`.
    """

    kind: TokenKind

    def __init__(self, *, impersonation_role: str, clock: Clock = time.time) -> None:
        self._impersonation_role = impersonation_role
        self._clock = clock

    def issue(
        self,
        principal: Principal | None,
        requested_subject: str | None = None,
    ) -> IssuedToken:
        if principal is None:
            raise UnauthenticatedError()

        subject = self.resolve_subject(principal, requested_subject)
        issued = self._mint(subject)
        log.info(
            "token_issued",
            token_kind=self.kind.value,
            subject=subject,
            principal=principal.subject,
            impersonated=subject != principal.subject,
        )
        return issued

    def resolve_subject(self, principal: Principal, requested_subject: str | None) -> str:
        if not requested_subject or requested_subject == principal.subject:
            return principal.subject
        if not principal.has_role(self._impersonation_role):
            log.warning(
                "subject_override_denied",
                principal=principal.subject,
                requested_subject=requested_subject,
            )
            raise SubjectOverrideDeniedError()
        return requested_subject

    @abstractmethod
    def _mint(self, subject: str) -> IssuedToken:
        raise NotImplementedError
