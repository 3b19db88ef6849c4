from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..attendance.rules import checkout_minutes
from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.enums import DatasetKind, VolunteerAction
from ..core.exceptions import NotFoundError
from ..sync.notifier import SyncNotifier
from .model import Volunteer, VolunteerLog
from .repository import VolunteerRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "role", "photo_url")


class VolunteerService:
    """Use cases: volunteer roster and the check-in/check-out state machine.

    States are Available (``is_checked_in=False``, the initial state) and
    CheckedIn. Checking in again while checked in is allowed and simply moves
    ``last_check_in`` forward.
    """

    def __init__(self, volunteers: VolunteerRepository, notifier: Optional[SyncNotifier] = None):
        self._volunteers = volunteers
        self._notifier = notifier

    def list_volunteers(self) -> Sequence[Volunteer]:
        return self._volunteers.list_all()

    def get_volunteer(self, volunteer_id: int) -> Volunteer:
        volunteer = self._volunteers.get_by_id(volunteer_id)
        if not volunteer:
            raise NotFoundError("Volunteer not found")
        return volunteer

    def list_logs(self, volunteer_id: Optional[int] = None) -> Sequence[VolunteerLog]:
        return self._volunteers.list_logs(volunteer_id)

    def create_volunteer(self, *, name: Any, role: Any, photo_url: Any = None, now: Optional[datetime] = None) -> Volunteer:
        volunteer = self._volunteers.create(
            name=require_non_empty(name, "name"),
            role=require_non_empty(role, "role"),
            photo_url=optional_text(photo_url, "photo_url"),
            now=now,
        )
        self._sync()
        return volunteer

    def update_volunteer(self, volunteer_id: int, changes: Mapping[str, Any]) -> Volunteer:
        """Profile edits only; check-in state moves through check_in/check_out."""
        clean: dict[str, Any] = {}
        for key, value in changes.items():
            if key not in EDITABLE_FIELDS:
                continue
            if key == "photo_url":
                clean[key] = optional_text(value, key)
            else:
                clean[key] = require_non_empty(value, key)

        volunteer = self._volunteers.update(volunteer_id, clean)
        if not volunteer:
            raise NotFoundError("Volunteer not found")
        self._sync()
        return volunteer

    def delete_volunteer(self, volunteer_id: int) -> None:
        if not self._volunteers.delete_by_id(volunteer_id):
            raise NotFoundError("Volunteer not found")
        self._sync()

    def check_in(self, volunteer_id: int, *, now: Optional[datetime] = None) -> Volunteer:
        now = now or now_local()
        self.get_volunteer(volunteer_id)

        volunteer = self._volunteers.update(volunteer_id, {"is_checked_in": True, "last_check_in": now})
        self._volunteers.add_log(volunteer_id=volunteer_id, action=VolunteerAction.CHECK_IN, now=now)
        self._sync()
        return volunteer

    def check_out(self, volunteer_id: int, *, activity: Any = None, now: Optional[datetime] = None) -> Volunteer:
        now = now or now_local()
        current = self.get_volunteer(volunteer_id)
        activity = optional_text(activity, "activity")

        hours_worked = checkout_minutes(current.last_check_in, now)
        volunteer = self._volunteers.update(volunteer_id, {"is_checked_in": False, "last_check_out": now})
        self._volunteers.add_log(
            volunteer_id=volunteer_id,
            action=VolunteerAction.CHECK_OUT,
            activity=activity,
            hours_worked=hours_worked,
            now=now,
        )
        self._sync()
        return volunteer

    def _sync(self) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(DatasetKind.VOLUNTEERS, self._volunteers.list_all(), self._volunteers.list_logs())
        except Exception:
            logger.exception("Volunteer sync failed")
