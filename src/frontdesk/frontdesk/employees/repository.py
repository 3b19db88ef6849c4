from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeAction
from .model import Employee, EmployeeLog


class EmployeeRepository(Protocol):
    """Repository interface for employees and their clock logs."""

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, role: str, is_active: bool = True, now: Optional[datetime] = None) -> Employee:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def add_log(self, *, employee_id: int, action: EmployeeAction, now: Optional[datetime] = None) -> EmployeeLog:
        raise NotImplementedError

    def list_logs(self, employee_id: Optional[int] = None) -> Sequence[EmployeeLog]:
        raise NotImplementedError

    def list_logs_today(self, *, now: Optional[datetime] = None) -> Sequence[EmployeeLog]:
        raise NotImplementedError
