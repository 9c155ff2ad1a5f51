"""Helpers shared by the Supabase adapters."""

from datetime import datetime

from postgrest.exceptions import APIError

_UNIQUE_VIOLATION = "23505"


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating nulls."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def is_unique_violation(exc: APIError, constraint_hint: str) -> bool:
    """Return True when ``exc`` is a unique violation mentioning the hint."""
    text = f"{exc.message or ''} {exc.details or ''}"
    return exc.code == _UNIQUE_VIOLATION and constraint_hint in text
