from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import EntityKind, VolunteerAction
from ..database.memory_store import MemoryStore
from .model import Volunteer, VolunteerLog
from .repository import VolunteerRepository


class MemoryVolunteerRepository(VolunteerRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Volunteer]:
        return self._store.get_all(EntityKind.VOLUNTEER)

    def get_by_id(self, volunteer_id: int) -> Optional[Volunteer]:
        return self._store.get(EntityKind.VOLUNTEER, volunteer_id)

    def create(self, *, name: str, role: str, photo_url: Optional[str] = None, now: Optional[datetime] = None) -> Volunteer:
        return self._store.create(
            EntityKind.VOLUNTEER,
            {"name": name, "role": role, "photo_url": photo_url},
            now=now,
        )

    def update(self, volunteer_id: int, changes: Mapping[str, Any]) -> Optional[Volunteer]:
        return self._store.update(EntityKind.VOLUNTEER, volunteer_id, changes)

    def delete_by_id(self, volunteer_id: int) -> bool:
        return self._store.delete(EntityKind.VOLUNTEER, volunteer_id)

    def add_log(
        self,
        *,
        volunteer_id: int,
        action: VolunteerAction,
        activity: Optional[str] = None,
        hours_worked: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> VolunteerLog:
        return self._store.create(
            EntityKind.VOLUNTEER_LOG,
            {
                "volunteer_id": volunteer_id,
                "action": action,
                "activity": activity,
                "hours_worked": hours_worked,
            },
            now=now,
        )

    def list_logs(self, volunteer_id: Optional[int] = None) -> Sequence[VolunteerLog]:
        return self._store.get_logs(EntityKind.VOLUNTEER_LOG, volunteer_id)
