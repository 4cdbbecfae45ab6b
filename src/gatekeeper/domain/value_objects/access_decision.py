"""Typed access decision returned to middleware."""

from dataclasses import dataclass
from enum import StrEnum


class DecisionOutcome(StrEnum):
    """Outcome of a permission check."""

    ALLOWED = "allowed"
    DENIED = "denied"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class AccessDecision:
    """Decision for one (user, role, code) question.

    UNDETERMINED means the effective set could not be read; callers must
    treat it as a refusal but may report it differently from DENIED.
    """

    outcome: DecisionOutcome
    permission: str
    reason: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is DecisionOutcome.ALLOWED

    @classmethod
    def allow(cls, permission: str) -> "AccessDecision":
        return cls(DecisionOutcome.ALLOWED, permission)

    @classmethod
    def deny(cls, permission: str, reason: str | None = None) -> "AccessDecision":
        return cls(DecisionOutcome.DENIED, permission, reason)

    @classmethod
    def undetermined(cls, permission: str, reason: str) -> "AccessDecision":
        return cls(DecisionOutcome.UNDETERMINED, permission, reason)
