from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.validators import optional_bool, optional_text, require_non_empty
from ..core.enums import DatasetKind
from ..sync.notifier import SyncNotifier
from .model import Guest
from .repository import GuestRepository

logger = logging.getLogger(__name__)


class GuestService:
    """Use case: register guest visits. Guests cannot be edited afterwards."""

    def __init__(self, guests: GuestRepository, notifier: Optional[SyncNotifier] = None):
        self._guests = guests
        self._notifier = notifier

    def list_guests(self) -> Sequence[Guest]:
        return self._guests.list_all()

    def list_todays_guests(self, *, now: Optional[datetime] = None) -> Sequence[Guest]:
        return self._guests.list_today(now=now)

    def register_visit(
        self,
        *,
        first_name: Any,
        last_name: Any,
        email: Any = None,
        phone: Any = None,
        purpose: Any = None,
        wants_newsletter: Any = None,
        now: Optional[datetime] = None,
    ) -> Guest:
        guest = self._guests.create(
            first_name=require_non_empty(first_name, "first_name"),
            last_name=require_non_empty(last_name, "last_name"),
            email=optional_text(email, "email"),
            phone=optional_text(phone, "phone"),
            purpose=optional_text(purpose, "purpose"),
            wants_newsletter=optional_bool(wants_newsletter, "wants_newsletter", default=False),
            now=now,
        )

        if self._notifier is not None:
            try:
                self._notifier.notify(DatasetKind.GUESTS, self._guests.list_all())
            except Exception:
                logger.exception("Guest sync failed")
        return guest
