from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_bounds(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Return ``[local midnight today, local midnight tomorrow)`` around ``now``."""
    now = now or now_local()
    start = datetime.combine(now.date(), time.min)
    return start, start + timedelta(days=1)


def is_same_day(value: Optional[datetime], now: Optional[datetime] = None) -> bool:
    if value is None:
        return False
    start, end = day_bounds(now)
    return start <= value < end


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
