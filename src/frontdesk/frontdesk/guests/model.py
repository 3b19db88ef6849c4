from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Guest:
    """Domain entity: one registered visit. Immutable after creation."""

    id: int
    first_name: str
    last_name: str
    visited_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    purpose: Optional[str] = None
    wants_newsletter: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
