from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import VolunteerAction


@dataclass(frozen=True)
class Volunteer:
    """Domain entity: a volunteer who checks in and out at the front desk.

    Note: ``is_checked_in`` implies ``last_check_in`` is set.
    """

    id: int
    name: str
    role: str
    created_at: datetime
    photo_url: Optional[str] = None
    is_checked_in: bool = False
    last_check_in: Optional[datetime] = None
    last_check_out: Optional[datetime] = None


@dataclass(frozen=True)
class VolunteerLog:
    """Append-only check-in/out entry; ``volunteer_id`` is a lookup key, not ownership."""

    id: int
    volunteer_id: int
    action: VolunteerAction
    timestamp: datetime
    activity: Optional[str] = None
    hours_worked: Optional[int] = None  # minutes, check_out only


@dataclass(frozen=True)
class VolunteerDayHours:
    """Read-model: minutes a volunteer has completed today."""

    volunteer_id: int
    name: str
    role: str
    is_checked_in: bool
    worked_minutes: int
