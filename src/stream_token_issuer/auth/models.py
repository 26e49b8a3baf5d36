"""
stream_token_issuer.auth.models

Auth domain models.

Responsibilities:
- Define the verified caller identity (`Principal`) handed to the token issuers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Caller identity verified by the identity gate. `subject` is never empty.
    """

    subject: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.subject:
            raise ValueError("principal subject must be non-empty")

    def has_role(self, role: str) -> bool:
        return role in self.roles
