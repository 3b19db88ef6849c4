from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.frontdesk.frontdesk.attendance.calculator.paired_calculator import PairedLogCalculator
from src.frontdesk.frontdesk.core.enums import EmployeeAction


@dataclass
class Log:
    action: EmployeeAction
    timestamp: datetime


def _calc() -> PairedLogCalculator:
    return PairedLogCalculator(EmployeeAction.CLOCK_IN, EmployeeAction.CLOCK_OUT)


def test_sums_complete_pairs():
    logs = [
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 8, 0)),
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 12, 0)),
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 13, 0)),
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 17, 30)),
    ]

    assert _calc().worked_minutes(logs) == 8 * 60 + 30


def test_unmatched_trailing_clock_in_counts_zero():
    logs = [
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 8, 0)),
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 9, 0)),
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 10, 0)),
    ]

    assert _calc().worked_minutes(logs) == 60


def test_sorts_before_pairing():
    logs = [
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 17, 0)),
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 13, 0)),
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 12, 0)),
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 8, 0)),
    ]

    assert _calc().pairs(logs) == [
        (datetime(2026, 2, 2, 8, 0), datetime(2026, 2, 2, 12, 0)),
        (datetime(2026, 2, 2, 13, 0), datetime(2026, 2, 2, 17, 0)),
    ]


def test_double_clock_in_pairs_positionally():
    logs = [
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 8, 0)),
        Log(EmployeeAction.CLOCK_IN, datetime(2026, 2, 2, 9, 0)),
        Log(EmployeeAction.CLOCK_OUT, datetime(2026, 2, 2, 10, 0)),
    ]

    assert _calc().worked_minutes(logs) == 120


def test_no_logs():
    assert _calc().worked_minutes([]) == 0
