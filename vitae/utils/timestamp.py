"""Timestamp helpers."""

from datetime import datetime


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat()
