from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Iterable

from ..common.datetime_utils import time_to_minutes, weekday_index
from ..core.enums import Branch


@dataclass(frozen=True)
class BranchSchedule:
    """Domain entity: fully resolved work schedule of one branch."""

    branch: Branch
    work_start_time: time
    work_end_time: time
    weekend_days: frozenset[int]
    grace_period_minutes: int
    penalty_value: float
    payroll_days_base: int
    payroll_hours_base: int

    @property
    def work_start_minutes(self) -> int:
        return time_to_minutes(self.work_start_time)

    @property
    def work_end_minutes(self) -> int:
        return time_to_minutes(self.work_end_time)

    def is_weekend(self, d: date) -> bool:
        return weekday_index(d) in self.weekend_days


@dataclass(frozen=True)
class Holiday:
    name: str
    start_date: date
    end_date: date

    def contains(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date


class HolidayCalendar:
    """Set of official holidays; a date is a holiday if any range covers it."""

    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._holidays = tuple(holidays)

    def __iter__(self):
        return iter(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    def is_holiday(self, d: date) -> bool:
        return any(h.contains(d) for h in self._holidays)

    def holiday_for(self, d: date) -> Holiday | None:
        for h in self._holidays:
            if h.contains(d):
                return h
        return None
