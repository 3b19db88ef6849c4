"""Pure check-in/clock-in rules.

Nothing here touches the store; services read records, call these functions,
then write the results back.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import is_same_day
from ..core.enums import ClockStatus, EmployeeAction, VolunteerAction
from ..employees.model import EmployeeLog
from .calculator.paired_calculator import PairedLogCalculator


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, floored, never negative."""
    seconds = (end - start).total_seconds()
    return max(int(seconds // 60), 0)


def checkout_minutes(last_check_in: Optional[datetime], now: datetime) -> int:
    if last_check_in is None:
        return 0
    return minutes_between(last_check_in, now)


def derive_clock_status(logs: Iterable[EmployeeLog], *, now: datetime) -> ClockStatus:
    """Status is the action of the latest log of ``now``'s day; clocked out when none."""
    todays = [log for log in logs if is_same_day(log.timestamp, now)]
    if not todays:
        return ClockStatus.CLOCKED_OUT

    latest = max(todays, key=lambda log: (log.timestamp, log.id))
    if latest.action == EmployeeAction.CLOCK_IN:
        return ClockStatus.CLOCKED_IN
    return ClockStatus.CLOCKED_OUT


def employee_calculator() -> PairedLogCalculator:
    return PairedLogCalculator(EmployeeAction.CLOCK_IN, EmployeeAction.CLOCK_OUT)


def volunteer_calculator() -> PairedLogCalculator:
    return PairedLogCalculator(VolunteerAction.CHECK_IN, VolunteerAction.CHECK_OUT)
