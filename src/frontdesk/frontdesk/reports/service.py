from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.calculator.paired_calculator import PairedLogCalculator
from ..attendance.rules import derive_clock_status, employee_calculator, volunteer_calculator
from ..common.datetime_utils import is_same_day, now_local
from ..core.enums import DatasetKind
from ..employees.model import EmployeeDayStatus
from ..employees.repository import EmployeeRepository
from ..guests.repository import GuestRepository
from ..volunteers.model import VolunteerDayHours
from ..volunteers.repository import VolunteerRepository
from . import export


@dataclass(frozen=True)
class DashboardStats:
    volunteers: int  # checked in right now
    guests: int  # visits today
    employees: int  # active on the roster


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class ReportService:
    """Read-only views across all three rosters: dashboard, daily hours, CSV."""

    def __init__(
        self,
        volunteers: VolunteerRepository,
        guests: GuestRepository,
        employees: EmployeeRepository,
        *,
        volunteer_hours: Optional[PairedLogCalculator] = None,
        employee_hours: Optional[PairedLogCalculator] = None,
    ):
        self._volunteers = volunteers
        self._guests = guests
        self._employees = employees
        self._volunteer_hours = volunteer_hours or volunteer_calculator()
        self._employee_hours = employee_hours or employee_calculator()

    def dashboard_stats(self, *, now: Optional[datetime] = None) -> DashboardStats:
        return DashboardStats(
            volunteers=sum(1 for v in self._volunteers.list_all() if v.is_checked_in),
            guests=len(self._guests.list_today(now=now)),
            employees=sum(1 for e in self._employees.list_all() if e.is_active),
        )

    def employee_day_statuses(self, *, now: Optional[datetime] = None) -> list[EmployeeDayStatus]:
        now = now or now_local()
        todays_logs = self._employees.list_logs_today(now=now)

        out: list[EmployeeDayStatus] = []
        for employee in self._employees.list_all():
            logs = [log for log in todays_logs if log.employee_id == employee.id]
            out.append(
                EmployeeDayStatus(
                    employee_id=employee.id,
                    name=employee.name,
                    role=employee.role,
                    status=derive_clock_status(logs, now=now),
                    worked_minutes=self._employee_hours.worked_minutes(logs),
                )
            )
        return out

    def volunteer_day_hours(self, *, now: Optional[datetime] = None) -> list[VolunteerDayHours]:
        now = now or now_local()
        todays_logs = [log for log in self._volunteers.list_logs() if is_same_day(log.timestamp, now)]

        out: list[VolunteerDayHours] = []
        for volunteer in self._volunteers.list_all():
            logs = [log for log in todays_logs if log.volunteer_id == volunteer.id]
            out.append(
                VolunteerDayHours(
                    volunteer_id=volunteer.id,
                    name=volunteer.name,
                    role=volunteer.role,
                    is_checked_in=bool(volunteer.is_checked_in),
                    worked_minutes=self._volunteer_hours.worked_minutes(logs),
                )
            )
        return out

    def export_csv(self, kind: DatasetKind) -> CsvExport:
        if kind == DatasetKind.VOLUNTEERS:
            content = export.volunteers_csv(self._volunteers.list_all(), self._volunteers.list_logs())
        elif kind == DatasetKind.GUESTS:
            content = export.guests_csv(self._guests.list_all())
        else:
            content = export.employees_csv(self._employees.list_all(), self._employees.list_logs())
        return CsvExport(filename=f"{kind.value}.csv", content=content)
