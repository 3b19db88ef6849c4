"""CSV exports for the data-access page.

Volunteer and employee exports carry a second table (their logs) after a blank
row and a title row, so one download holds the whole picture.
"""
from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import EMPLOYEE_STATUS_LABELS, NEWSLETTER_LABELS, VOLUNTEER_STATUS_LABELS
from ..employees.model import Employee, EmployeeLog
from ..guests.model import Guest
from ..volunteers.model import Volunteer, VolunteerLog

VOLUNTEER_HEADER = ["ID", "Name", "Role", "Status", "Last Check In", "Last Check Out", "Created At"]
VOLUNTEER_LOG_HEADER = ["ID", "Volunteer ID", "Action", "Timestamp", "Activity", "Hours Worked"]
GUEST_HEADER = ["ID", "First Name", "Last Name", "Email", "Phone", "Purpose", "Newsletter", "Visited At"]
EMPLOYEE_HEADER = ["ID", "Name", "Role", "Status", "Created At"]
EMPLOYEE_LOG_HEADER = ["ID", "Employee ID", "Action", "Timestamp"]


def _ts(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


def _render(*tables: tuple[Optional[str], list[str], Iterable[list]]) -> str:
    out = io.StringIO()
    writer = csv.writer(out)
    for index, (title, header, rows) in enumerate(tables):
        if index:
            writer.writerow([])
        if title:
            writer.writerow([title])
        writer.writerow(header)
        writer.writerows(rows)
    return out.getvalue()


def volunteers_csv(volunteers: Sequence[Volunteer], logs: Sequence[VolunteerLog]) -> str:
    volunteer_rows = [
        [
            v.id,
            v.name,
            v.role,
            VOLUNTEER_STATUS_LABELS[bool(v.is_checked_in)],
            _ts(v.last_check_in),
            _ts(v.last_check_out),
            _ts(v.created_at),
        ]
        for v in volunteers
    ]
    log_rows = [
        [log.id, log.volunteer_id, log.action.value, _ts(log.timestamp), log.activity or "", log.hours_worked or 0]
        for log in logs
    ]
    return _render((None, VOLUNTEER_HEADER, volunteer_rows), ("Volunteer Logs", VOLUNTEER_LOG_HEADER, log_rows))


def guests_csv(guests: Sequence[Guest]) -> str:
    rows = [
        [
            g.id,
            g.first_name,
            g.last_name,
            g.email or "",
            g.phone or "",
            g.purpose or "",
            NEWSLETTER_LABELS[bool(g.wants_newsletter)],
            _ts(g.visited_at),
        ]
        for g in guests
    ]
    return _render((None, GUEST_HEADER, rows))


def employees_csv(employees: Sequence[Employee], logs: Sequence[EmployeeLog]) -> str:
    employee_rows = [
        [e.id, e.name, e.role, EMPLOYEE_STATUS_LABELS[bool(e.is_active)], _ts(e.created_at)]
        for e in employees
    ]
    log_rows = [[log.id, log.employee_id, log.action.value, _ts(log.timestamp)] for log in logs]
    return _render((None, EMPLOYEE_HEADER, employee_rows), ("Employee Logs", EMPLOYEE_LOG_HEADER, log_rows))
