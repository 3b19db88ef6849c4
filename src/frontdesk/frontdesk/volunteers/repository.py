from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import VolunteerAction
from .model import Volunteer, VolunteerLog


class VolunteerRepository(Protocol):
    """Repository interface for volunteers and their check-in/out logs.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Volunteer]:
        raise NotImplementedError

    def get_by_id(self, volunteer_id: int) -> Optional[Volunteer]:
        raise NotImplementedError

    def create(self, *, name: str, role: str, photo_url: Optional[str] = None, now: Optional[datetime] = None) -> Volunteer:
        raise NotImplementedError

    def update(self, volunteer_id: int, changes: Mapping[str, Any]) -> Optional[Volunteer]:
        raise NotImplementedError

    def delete_by_id(self, volunteer_id: int) -> bool:
        """Delete the volunteer and every log that references it."""

        raise NotImplementedError

    def add_log(
        self,
        *,
        volunteer_id: int,
        action: VolunteerAction,
        activity: Optional[str] = None,
        hours_worked: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> VolunteerLog:
        raise NotImplementedError

    def list_logs(self, volunteer_id: Optional[int] = None) -> Sequence[VolunteerLog]:
        raise NotImplementedError
