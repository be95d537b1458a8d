"""Query window calculation."""

import math
from datetime import datetime, timedelta, timezone
from typing import Tuple

DEFAULT_PERIOD_SECONDS = 300


def latest_complete_period(
    now: datetime,
    period_seconds: int = DEFAULT_PERIOD_SECONDS,
) -> Tuple[datetime, datetime]:
    """Return the most recent complete period ending at or before ``now``.

    The upper bound is aligned to a multiple of ``period_seconds`` since the
    epoch, so every call inside the same period yields the same window.

    Args:
        now: Current time. Naive datetimes are treated as UTC.
        period_seconds: Window length in seconds.

    Returns:
        (lower, upper) as aware UTC datetimes.
    """
    if period_seconds <= 0:
        raise ValueError(f"period_seconds must be positive, got {period_seconds}")

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    timestamp = math.floor(now.timestamp())
    upper_timestamp = timestamp - (timestamp % period_seconds)
    upper = datetime.fromtimestamp(upper_timestamp, tz=timezone.utc)
    lower = upper - timedelta(seconds=period_seconds)
    return lower, upper


def format_rfc3339(moment: datetime) -> str:
    """Format as RFC 3339 in UTC with second precision, e.g. 2024-01-01T00:05:00Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
