"""
Field validation helpers.

Pure functions; none of them raise. Callers decide whether a failed check is a
400 (create) or a skipped field (partial update).
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

# bigserial upper bound
MAX_ID = 2**63 - 1

# Postgres `integer`
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_integer(value: Any, *, minimum: int | None = None, maximum: int | None = None) -> bool:
    """
    True for a JSON integer, optionally within [minimum, maximum].
    """
    # JSON true/false decode to bool, which is an int subclass.
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def parse_date(value: Any) -> str | None:
    """
    Normalize a calendar date to "YYYY-MM-DD".

    Accepts a plain ISO date or an ISO date-time (the date part is kept).
    """
    if not is_non_empty_string(value):
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date().isoformat()
    except ValueError:
        return None


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse an ISO-8601 date or date-time. Naive values are taken as UTC.
    """
    if not is_non_empty_string(value):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_id(value: Any) -> int | None:
    """
    Parse a numeric path identifier.
    """
    raw = str(value or "").strip()
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    parsed = int(raw)
    if parsed > MAX_ID:
        return None
    return parsed
