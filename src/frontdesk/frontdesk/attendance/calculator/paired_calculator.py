from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from .base import TimedLog, WorkedTimeCalculator


class PairedLogCalculator(WorkedTimeCalculator):
    """Positional pairing: the n-th start log closes with the n-th end log.

    Logs are sorted ascending by timestamp first. Only complete pairs count;
    a trailing unmatched start (still on shift) or end contributes nothing.
    There are no pairing ids, so two starts in a row shift every later pair.
    """

    def __init__(self, start_action: str, end_action: str):
        self._start_action = start_action
        self._end_action = end_action

    def pairs(self, logs: Iterable[TimedLog]) -> list[tuple[datetime, datetime]]:
        ordered = sorted(logs, key=lambda log: log.timestamp)
        starts = [log.timestamp for log in ordered if log.action == self._start_action]
        ends = [log.timestamp for log in ordered if log.action == self._end_action]
        return list(zip(starts, ends))

    def worked_time(self, logs: Iterable[TimedLog]) -> timedelta:
        total = timedelta()
        for start, end in self.pairs(logs):
            total += end - start
        return total

    def worked_minutes(self, logs: Iterable[TimedLog]) -> int:
        return int(self.worked_time(logs).total_seconds() // 60)
