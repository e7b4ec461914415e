"""
Timestamps for session records, report headers and log directories.

Stored timestamps are ISO 8601 strings. Anything that fails to parse is shown
as-is rather than raising, since stored sessions may carry arbitrary text.
"""

from datetime import datetime
from typing import Optional

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
DIRECTORY_FORMAT = "%Y%m%d_%H%M%S"

# (unit suffix, seconds per unit), largest first
AGE_UNITS = (("d", 86400), ("h", 3600), ("m", 60), ("s", 1))


def now() -> str:
    """Current local time as ISO 8601, second precision."""
    return datetime.now().isoformat(timespec="seconds")


def compact_now() -> str:
    """Current local time for log directory names, e.g. "20261019_154210"."""
    return datetime.now().strftime(DIRECTORY_FORMAT)


def _parse(iso_timestamp: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(iso_timestamp)
    except (ValueError, TypeError):
        return None


def display_timestamp(iso_timestamp: str) -> str:
    """
    ISO timestamp as "YYYY-MM-DD HH:MM:SS" for report headers.

    Example:
        >>> display_timestamp("2026-10-19T18:45:40.572549")
        '2026-10-19 18:45:40'
    """
    parsed = _parse(iso_timestamp)
    return parsed.strftime(DISPLAY_FORMAT) if parsed else iso_timestamp


def time_since(iso_timestamp: str, reference: datetime = None) -> str:
    """
    Compact age of an ISO timestamp, e.g. "2h ago" or "5m from now".

    Only the largest whole unit is shown.

    Args:
        iso_timestamp: Timestamp to describe
        reference: Point in time to measure from (defaults to now)

    Example:
        >>> time_since("2026-10-19T09:00:00", datetime(2026, 10, 19, 11, 30))
        '2h ago'
    """
    parsed = _parse(iso_timestamp)
    if parsed is None:
        return iso_timestamp

    reference = reference or datetime.now(parsed.tzinfo)
    elapsed = int((reference - parsed).total_seconds())
    suffix = "ago" if elapsed >= 0 else "from now"
    elapsed = abs(elapsed)

    for unit, size in AGE_UNITS:
        if elapsed >= size:
            return f"{elapsed // size}{unit} {suffix}"
    return f"0s {suffix}"
