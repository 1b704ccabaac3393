"""Lenient timestamp parsing for API and webhook payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

# Formats seen in API payloads that fromisoformat may not cover
_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%d/%m/%Y %H:%M:%S",
)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp, returning None instead of raising on bad input.

    Accepts ISO 8601 strings (with or without a trailing ``Z``), the
    ``YYYY-MM-DD HH:MM:SS`` form used by status lookups, epoch seconds, and
    datetime instances.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
