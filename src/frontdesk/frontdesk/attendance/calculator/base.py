from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Protocol


class TimedLog(Protocol):
    action: str
    timestamp: datetime


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, logs: Iterable[TimedLog]) -> int:
        raise NotImplementedError
