"""Authenticated caller identity as supplied by request middleware."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """User id and role of the caller. Gatekeeper never authenticates it."""

    user_id: int
    role: str
