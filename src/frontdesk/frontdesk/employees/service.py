from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..attendance.rules import derive_clock_status
from ..common.datetime_utils import now_local
from ..common.validators import optional_bool, require_non_empty
from ..core.enums import ClockStatus, DatasetKind, EmployeeAction
from ..core.exceptions import NotFoundError
from ..sync.notifier import SyncNotifier
from .model import Employee, EmployeeLog
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: employee roster and time clock.

    Clocking in or out always appends a log. Two clock-ins in a row are
    accepted; the current status is whatever today's latest log says.
    """

    def __init__(self, employees: EmployeeRepository, notifier: Optional[SyncNotifier] = None):
        self._employees = employees
        self._notifier = notifier

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list_logs(self, employee_id: Optional[int] = None) -> Sequence[EmployeeLog]:
        return self._employees.list_logs(employee_id)

    def list_todays_logs(self, *, now: Optional[datetime] = None) -> Sequence[EmployeeLog]:
        return self._employees.list_logs_today(now=now)

    def create_employee(self, *, name: Any, role: Any, is_active: Any = None, now: Optional[datetime] = None) -> Employee:
        employee = self._employees.create(
            name=require_non_empty(name, "name"),
            role=require_non_empty(role, "role"),
            is_active=optional_bool(is_active, "is_active", default=True),
            now=now,
        )
        self._sync()
        return employee

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        self._sync()

    def clock_in(self, employee_id: int, *, now: Optional[datetime] = None) -> EmployeeLog:
        return self._clock(employee_id, EmployeeAction.CLOCK_IN, now=now)

    def clock_out(self, employee_id: int, *, now: Optional[datetime] = None) -> EmployeeLog:
        return self._clock(employee_id, EmployeeAction.CLOCK_OUT, now=now)

    def current_status(self, employee_id: int, *, now: Optional[datetime] = None) -> ClockStatus:
        now = now or now_local()
        self.get_employee(employee_id)
        return derive_clock_status(self._employees.list_logs(employee_id), now=now)

    def _clock(self, employee_id: int, action: EmployeeAction, *, now: Optional[datetime]) -> EmployeeLog:
        now = now or now_local()
        self.get_employee(employee_id)

        log = self._employees.add_log(employee_id=employee_id, action=action, now=now)
        self._sync()
        return log

    def _sync(self) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(DatasetKind.EMPLOYEES, self._employees.list_all(), self._employees.list_logs())
        except Exception:
            logger.exception("Employee sync failed")
