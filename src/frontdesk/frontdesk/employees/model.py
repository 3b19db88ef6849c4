from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import ClockStatus, EmployeeAction


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    There is no clocked-in flag; status is derived from today's logs.
    """

    id: int
    name: str
    role: str
    created_at: datetime
    is_active: bool = True


@dataclass(frozen=True)
class EmployeeLog:
    id: int
    employee_id: int
    action: EmployeeAction
    timestamp: datetime


@dataclass(frozen=True)
class EmployeeDayStatus:
    """Read-model for the clock page: derived status plus minutes worked today."""

    employee_id: int
    name: str
    role: str
    status: ClockStatus
    worked_minutes: int
