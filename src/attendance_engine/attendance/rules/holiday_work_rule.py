from __future__ import annotations

from dataclasses import replace

from ...core.enums import AttendanceStatus, DayKind
from ..model import DailyStats
from .base import ClassificationRule, DayContext


class HolidayWorkRule(ClassificationRule):
    """Work on a weekend, an official holiday or a leave day is all overtime."""

    name = "holiday_work"

    def matches(self, ctx: DayContext) -> bool:
        return ctx.is_weekend or ctx.is_official_holiday or ctx.status == AttendanceStatus.LEAVE

    def evaluate(self, ctx: DayContext) -> DailyStats:
        check_in, check_out = ctx.worked_span()
        worked = check_out - check_in

        if ctx.status == AttendanceStatus.LEAVE:
            kind = DayKind.WORK_ON_LEAVE
        elif ctx.is_official_holiday:
            kind = DayKind.WORK_ON_OFFICIAL_HOLIDAY
        else:
            kind = DayKind.WORK_ON_WEEKEND

        return replace(
            ctx.empty_stats(kind),
            overtime_minutes=worked,
            net_overtime_minutes=worked,
            working_minutes=worked,
        )
