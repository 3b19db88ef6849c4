"""In-memory entity store.

One ``MemoryStore`` is built per process by the container and shared by every
repository adapter. Records live in insertion-ordered dicts keyed by id, with a
per-kind counter that starts at 1 and is never rewound, so ids are not reused
after deletion.

Note: There is no locking. Concurrent requests touching the same id race and
the last write wins.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import day_bounds, now_local
from ..core.enums import EmployeeAction, EntityKind, VolunteerAction
from ..employees.model import Employee, EmployeeLog
from ..guests.model import Guest
from ..volunteers.model import Volunteer, VolunteerLog


@dataclass
class _Table:
    rows: dict[int, Any] = field(default_factory=dict)
    next_id: int = 1

    def allocate_id(self) -> int:
        record_id = self.next_id
        self.next_id += 1
        return record_id


def _build_volunteer(record_id: int, payload: Mapping[str, Any], now: datetime) -> Volunteer:
    return Volunteer(
        id=record_id,
        name=payload["name"],
        role=payload["role"],
        photo_url=payload.get("photo_url"),
        is_checked_in=False,
        last_check_in=None,
        last_check_out=None,
        created_at=now,
    )


def _build_volunteer_log(record_id: int, payload: Mapping[str, Any], now: datetime) -> VolunteerLog:
    return VolunteerLog(
        id=record_id,
        volunteer_id=int(payload["volunteer_id"]),
        action=VolunteerAction(payload["action"]),
        timestamp=now,
        activity=payload.get("activity"),
        hours_worked=payload.get("hours_worked"),
    )


def _build_guest(record_id: int, payload: Mapping[str, Any], now: datetime) -> Guest:
    return Guest(
        id=record_id,
        first_name=payload["first_name"],
        last_name=payload["last_name"],
        email=payload.get("email"),
        phone=payload.get("phone"),
        purpose=payload.get("purpose"),
        wants_newsletter=bool(payload.get("wants_newsletter", False)),
        visited_at=now,
    )


def _build_employee(record_id: int, payload: Mapping[str, Any], now: datetime) -> Employee:
    is_active = payload.get("is_active")
    return Employee(
        id=record_id,
        name=payload["name"],
        role=payload["role"],
        is_active=True if is_active is None else bool(is_active),
        created_at=now,
    )


def _build_employee_log(record_id: int, payload: Mapping[str, Any], now: datetime) -> EmployeeLog:
    return EmployeeLog(
        id=record_id,
        employee_id=int(payload["employee_id"]),
        action=EmployeeAction(payload["action"]),
        timestamp=now,
    )


_BUILDERS: dict[EntityKind, Callable[[int, Mapping[str, Any], datetime], Any]] = {
    EntityKind.VOLUNTEER: _build_volunteer,
    EntityKind.VOLUNTEER_LOG: _build_volunteer_log,
    EntityKind.GUEST: _build_guest,
    EntityKind.EMPLOYEE: _build_employee,
    EntityKind.EMPLOYEE_LOG: _build_employee_log,
}

# parent kind -> (log kind, reference attribute on the log)
_CASCADES: dict[EntityKind, tuple[EntityKind, str]] = {
    EntityKind.VOLUNTEER: (EntityKind.VOLUNTEER_LOG, "volunteer_id"),
    EntityKind.EMPLOYEE: (EntityKind.EMPLOYEE_LOG, "employee_id"),
}

_LOG_REFS: dict[EntityKind, str] = {log_kind: ref_attr for log_kind, ref_attr in _CASCADES.values()}

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

_UPDATABLE: dict[EntityKind, frozenset[str]] = {
    EntityKind.VOLUNTEER: frozenset(f.name for f in fields(Volunteer)) - _IMMUTABLE_FIELDS,
}


class MemoryStore:
    """Repository of all five record kinds, keyed by synthetic integer ids."""

    def __init__(self) -> None:
        self._tables: dict[EntityKind, _Table] = {kind: _Table() for kind in EntityKind}

    def create(self, kind: EntityKind, payload: Mapping[str, Any], *, now: Optional[datetime] = None):
        """Assign the next id for ``kind``, fill defaults, store and return the record.

        No validation happens here; callers check the payload first.
        """
        table = self._tables[kind]
        record = _BUILDERS[kind](table.allocate_id(), payload, now or now_local())
        table.rows[record.id] = record
        return record

    def get(self, kind: EntityKind, record_id: int):
        return self._tables[kind].rows.get(record_id)

    def get_all(self, kind: EntityKind) -> list:
        return list(self._tables[kind].rows.values())

    def update(self, kind: EntityKind, record_id: int, changes: Mapping[str, Any]):
        """Shallow-merge ``changes`` onto an existing record.

        Keys outside the kind's whitelist (``id``, ``created_at``, unknown names)
        are dropped. Returns the updated record or ``None`` when absent.
        """
        allowed = _UPDATABLE.get(kind)
        if allowed is None:
            raise ValueError(f"{kind.value} records cannot be updated")

        table = self._tables[kind]
        current = table.rows.get(record_id)
        if current is None:
            return None

        updated = replace(current, **{k: v for k, v in changes.items() if k in allowed})
        table.rows[record_id] = updated
        return updated

    def delete(self, kind: EntityKind, record_id: int) -> bool:
        """Remove a record; volunteers and employees take their logs with them."""
        table = self._tables[kind]
        if record_id not in table.rows:
            return False
        del table.rows[record_id]

        cascade = _CASCADES.get(kind)
        if cascade:
            log_kind, ref_attr = cascade
            logs = self._tables[log_kind].rows
            for log_id in [i for i, log in logs.items() if getattr(log, ref_attr) == record_id]:
                del logs[log_id]
        return True

    def get_logs(self, kind: EntityKind, parent_id: Optional[int] = None) -> list:
        ref_attr = _LOG_REFS.get(kind)
        if ref_attr is None:
            raise ValueError(f"{kind.value} is not a log kind")
        logs = self.get_all(kind)
        if parent_id is None:
            return logs
        return [log for log in logs if getattr(log, ref_attr) == parent_id]

    def get_todays_guests(self, *, now: Optional[datetime] = None) -> list[Guest]:
        start, end = day_bounds(now)
        return [g for g in self.get_all(EntityKind.GUEST) if start <= g.visited_at < end]

    def get_todays_employee_logs(self, *, now: Optional[datetime] = None) -> list[EmployeeLog]:
        start, end = day_bounds(now)
        return [log for log in self.get_all(EntityKind.EMPLOYEE_LOG) if start <= log.timestamp < end]
