from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Guest


class GuestRepository(Protocol):
    def list_all(self) -> Sequence[Guest]:
        raise NotImplementedError

    def list_today(self, *, now: Optional[datetime] = None) -> Sequence[Guest]:
        raise NotImplementedError

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
        raise NotImplementedError
