"""JSON bodies pushed to the spreadsheet webhook.

Each body is a full snapshot of one entity kind, never a delta. Absent
timestamps and optional text become ``""`` because the receiving sheet writes
cells verbatim.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import EMPLOYEE_STATUS_LABELS, NEWSLETTER_LABELS, VOLUNTEER_STATUS_LABELS
from ..core.enums import DatasetKind
from ..employees.model import Employee, EmployeeLog
from ..guests.model import Guest
from ..volunteers.model import Volunteer, VolunteerLog


def _iso(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


def volunteers_payload(volunteers: Sequence[Volunteer], logs: Sequence[VolunteerLog]) -> dict:
    return {
        "type": DatasetKind.VOLUNTEERS.value,
        "volunteers": [
            {
                "id": v.id,
                "name": v.name,
                "role": v.role,
                "status": VOLUNTEER_STATUS_LABELS[bool(v.is_checked_in)],
                "lastCheckIn": _iso(v.last_check_in),
                "lastCheckOut": _iso(v.last_check_out),
                "createdAt": _iso(v.created_at),
            }
            for v in volunteers
        ],
        "logs": [
            {
                "id": log.id,
                "volunteerId": log.volunteer_id,
                "action": log.action.value,
                "timestamp": _iso(log.timestamp),
                "activity": log.activity or "",
                "hoursWorked": log.hours_worked or 0,
            }
            for log in logs
        ],
    }


def guests_payload(guests: Sequence[Guest]) -> dict:
    return {
        "type": DatasetKind.GUESTS.value,
        "guests": [
            {
                "id": g.id,
                "firstName": g.first_name,
                "lastName": g.last_name,
                "email": g.email or "",
                "phone": g.phone or "",
                "purpose": g.purpose or "",
                "wantsNewsletter": NEWSLETTER_LABELS[bool(g.wants_newsletter)],
                "visitedAt": _iso(g.visited_at),
            }
            for g in guests
        ],
    }


def employees_payload(employees: Sequence[Employee], logs: Sequence[EmployeeLog]) -> dict:
    return {
        "type": DatasetKind.EMPLOYEES.value,
        "employees": [
            {
                "id": e.id,
                "name": e.name,
                "role": e.role,
                "status": EMPLOYEE_STATUS_LABELS[bool(e.is_active)],
                "createdAt": _iso(e.created_at),
            }
            for e in employees
        ],
        "logs": [
            {
                "id": log.id,
                "employeeId": log.employee_id,
                "action": log.action.value,
                "timestamp": _iso(log.timestamp),
            }
            for log in logs
        ],
    }


PAYLOAD_BUILDERS = {
    DatasetKind.VOLUNTEERS: volunteers_payload,
    DatasetKind.GUESTS: guests_payload,
    DatasetKind.EMPLOYEES: employees_payload,
}


def build_payload(kind: DatasetKind, *snapshots) -> dict:
    return PAYLOAD_BUILDERS[kind](*snapshots)
