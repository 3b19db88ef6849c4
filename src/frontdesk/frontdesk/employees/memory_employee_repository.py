from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import EmployeeAction, EntityKind
from ..database.memory_store import MemoryStore
from .model import Employee, EmployeeLog
from .repository import EmployeeRepository


class MemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return self._store.get_all(EntityKind.EMPLOYEE)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._store.get(EntityKind.EMPLOYEE, employee_id)

    def create(self, *, name: str, role: str, is_active: bool = True, now: Optional[datetime] = None) -> Employee:
        return self._store.create(
            EntityKind.EMPLOYEE,
            {"name": name, "role": role, "is_active": is_active},
            now=now,
        )

    def delete_by_id(self, employee_id: int) -> bool:
        return self._store.delete(EntityKind.EMPLOYEE, employee_id)

    def add_log(self, *, employee_id: int, action: EmployeeAction, now: Optional[datetime] = None) -> EmployeeLog:
        return self._store.create(
            EntityKind.EMPLOYEE_LOG,
            {"employee_id": employee_id, "action": action},
            now=now,
        )

    def list_logs(self, employee_id: Optional[int] = None) -> Sequence[EmployeeLog]:
        return self._store.get_logs(EntityKind.EMPLOYEE_LOG, employee_id)

    def list_logs_today(self, *, now: Optional[datetime] = None) -> Sequence[EmployeeLog]:
        return self._store.get_todays_employee_logs(now=now)
