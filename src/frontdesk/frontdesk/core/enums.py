from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    """Record kinds held by the in-memory store."""

    VOLUNTEER = "volunteer"
    VOLUNTEER_LOG = "volunteer_log"
    GUEST = "guest"
    EMPLOYEE = "employee"
    EMPLOYEE_LOG = "employee_log"


class VolunteerAction(str, Enum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"


class EmployeeAction(str, Enum):
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"


class ClockStatus(str, Enum):
    """Derived employee status; never stored."""

    CLOCKED_IN = "clocked_in"
    CLOCKED_OUT = "clocked_out"


class DatasetKind(str, Enum):
    """Full-collection datasets: pushed to the webhook and exported as CSV."""

    VOLUNTEERS = "volunteers"
    GUESTS = "guests"
    EMPLOYEES = "employees"
