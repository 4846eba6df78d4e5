from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...common.datetime_utils import time_to_minutes
from ...core.constants import MINUTES_PER_DAY
from ...core.enums import AttendanceStatus, DayKind
from ...core.exceptions import ParseError, ValidationError
from ...schedules.model import BranchSchedule, HolidayCalendar
from ..model import AttendanceRecord, DailyStats


@dataclass(frozen=True)
class DayContext:
    """Everything a rule may look at for one (worker, date)."""

    work_date: date
    schedule: BranchSchedule
    holidays: HolidayCalendar
    record: Optional[AttendanceRecord] = None

    @property
    def status(self) -> Optional[AttendanceStatus]:
        return self.record.status if self.record else None

    @property
    def is_weekend(self) -> bool:
        return self.schedule.is_weekend(self.work_date)

    @property
    def is_official_holiday(self) -> bool:
        return self.holidays.is_holiday(self.work_date)

    def _minutes(self, value: str) -> int:
        try:
            return time_to_minutes(value)
        except ValueError:
            raise ParseError(
                value,
                employee_id=self.record.employee_id if self.record else None,
                work_date=self.work_date,
            ) from None

    def worked_span(self) -> tuple[int, int]:
        """(check-in, check-out) in minutes; check-out rolls past midnight if needed."""
        if self.record is None or not self.record.has_full_times:
            raise ValidationError(f"No complete check-in/check-out on {self.work_date}")
        check_in = self._minutes(self.record.check_in)
        check_out = self._minutes(self.record.check_out)
        if check_out < check_in:
            check_out += MINUTES_PER_DAY
        return check_in, check_out

    def empty_stats(self, kind: DayKind) -> DailyStats:
        return DailyStats(
            work_date=self.work_date,
            kind=kind,
            record=self.record,
            is_weekend=self.is_weekend,
            is_official_holiday=self.is_official_holiday,
        )


class ClassificationRule(ABC):
    """Strategy Pattern: one step of the status-precedence ladder."""

    name: str = ""

    @abstractmethod
    def matches(self, ctx: DayContext) -> bool:
        raise NotImplementedError

    @abstractmethod
    def evaluate(self, ctx: DayContext) -> DailyStats:
        raise NotImplementedError
