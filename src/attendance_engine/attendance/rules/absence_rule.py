from __future__ import annotations

from ...core.enums import AttendanceStatus, DayKind
from ..model import DailyStats
from .base import ClassificationRule, DayContext


class AbsentPenaltyRule(ClassificationRule):
    """Unauthorized absence; recorded check-in/out times are ignored."""

    name = "absent_penalty"

    def matches(self, ctx: DayContext) -> bool:
        return ctx.status == AttendanceStatus.ABSENT_PENALTY

    def evaluate(self, ctx: DayContext) -> DailyStats:
        return ctx.empty_stats(DayKind.UNAUTHORIZED_ABSENCE)


class IncompleteRecordRule(ClassificationRule):
    """No record, or a record missing check-in or check-out."""

    name = "incomplete_record"

    def matches(self, ctx: DayContext) -> bool:
        return ctx.record is None or not ctx.record.has_full_times

    def evaluate(self, ctx: DayContext) -> DailyStats:
        if ctx.status == AttendanceStatus.LEAVE:
            kind = DayKind.LEAVE
        elif ctx.is_official_holiday:
            kind = DayKind.OFFICIAL_HOLIDAY
        elif ctx.is_weekend:
            kind = DayKind.WEEKLY_DAY_OFF
        else:
            kind = DayKind.ABSENT
        return ctx.empty_stats(kind)
