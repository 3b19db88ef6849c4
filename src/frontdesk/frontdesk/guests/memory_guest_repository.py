from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import EntityKind
from ..database.memory_store import MemoryStore
from .model import Guest
from .repository import GuestRepository


class MemoryGuestRepository(GuestRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Guest]:
        return self._store.get_all(EntityKind.GUEST)

    def list_today(self, *, now: Optional[datetime] = None) -> Sequence[Guest]:
        return self._store.get_todays_guests(now=now)

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        purpose: Optional[str] = None,
        wants_newsletter: bool = False,
        now: Optional[datetime] = None,
    ) -> Guest:
        return self._store.create(
            EntityKind.GUEST,
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "phone": phone,
                "purpose": purpose,
                "wants_newsletter": wants_newsletter,
            },
            now=now,
        )
