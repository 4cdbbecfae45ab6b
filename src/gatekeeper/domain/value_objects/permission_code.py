"""Helpers for opaque ``category.action`` permission code strings."""

import re

CODE_PATTERN = re.compile(r"^[a-z][a-z0-9_]*\.[a-z][a-z0-9_]*$")
MAX_CODE_LENGTH = 100


def normalize_code(code: str) -> str:
    """Strip surrounding whitespace. Case is preserved; codes are compared verbatim."""
    return code.strip()


def is_well_formed(code: str) -> bool:
    """True if code matches ``category.action``.

    Malformed codes are still valid set members; replace-all only logs a
    warning for them.
    """
    return bool(CODE_PATTERN.match(code))


def split_code(code: str) -> tuple[str, str]:
    """Return the first two dot-separated segments (missing ones are empty)."""
    parts = code.split(".")
    category = parts[0] if parts else ""
    action = parts[1] if len(parts) > 1 else ""
    return category, action
