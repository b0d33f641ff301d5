"""
Text formatting helpers for tool output.

Durations, percentages, breakdown sections and query strings.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional
from urllib.parse import urlencode


def format_duration(total_seconds: int) -> str:
    """
    Render seconds as '<h>h <m>m', or '<m>m' under one hour.

    Leftover seconds are dropped, never rounded.

    Raises:
        ValueError: total_seconds is negative
    """
    if total_seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {total_seconds}")

    total_seconds = int(total_seconds)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_percent(percent: float) -> str:
    """Round to a whole number, halves away from zero (12.5 -> '13')."""
    rounded = Decimal(str(percent)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_breakdown(title: str, entries: Iterable) -> list[str]:
    """
    Build a 'Projects:' / 'Languages:' section.

    Entries keep backend order. Returns an empty list when there are none,
    otherwise a leading blank line, the header and one indented line per entry.
    """
    lines = [
        f"  {e.name}: {format_duration(e.total_seconds)} ({format_percent(e.percent)}%)"
        for e in entries
    ]
    if not lines:
        return []
    return ["", f"{title}:", *lines]


def build_query(params: dict[str, Optional[str]]) -> str:
    """
    Build '?k=v&...' from params that have a non-empty value.

    Returns an empty string when nothing is left.
    """
    present = {key: value for key, value in params.items() if value}
    if not present:
        return ""
    return f"?{urlencode(present)}"


def utc_isoformat(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a 'Z' suffix."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    utc = dt.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
