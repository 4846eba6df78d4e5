from __future__ import annotations

from dataclasses import replace

from ...core.enums import AttendanceStatus, DayKind
from ..model import DailyStats
from .base import ClassificationRule, DayContext


class WorkingDayRule(ClassificationRule):
    """Normal working day with both times recorded. Always matches; keep it last."""

    name = "working_day"

    def matches(self, ctx: DayContext) -> bool:
        return True

    def evaluate(self, ctx: DayContext) -> DailyStats:
        record = ctx.record
        schedule = ctx.schedule
        check_in, check_out = ctx.worked_span()
        work_start = schedule.work_start_minutes
        work_end = schedule.work_end_minutes
        grace = schedule.grace_period_minutes

        raw_overtime = 0
        delay = 0
        early_departure = 0
        early_departure_deduction = 0

        if check_in > work_start:
            actual_delay = check_in - work_start
            # below the grace period lateness is not reported at all
            if actual_delay > grace:
                delay = actual_delay
        else:
            raw_overtime += work_start - check_in

        if check_out > work_end:
            raw_overtime += check_out - work_end
        elif check_out < work_end:
            early_departure = work_end - check_out
            if not record.early_departure_permission:
                early_departure_deduction = early_departure

        # grace is subtracted again from the already-thresholded delay
        delay_penalty = max(0, delay - grace) if delay > 0 else 0
        net_overtime = max(0, raw_overtime - delay_penalty - early_departure_deduction)

        if record.status == AttendanceStatus.ABSENT:
            kind = DayKind.ABSENT
        elif delay > 0:
            kind = DayKind.LATE
        elif early_departure > 0 and not record.early_departure_permission:
            kind = DayKind.EARLY_DEPARTURE
        else:
            kind = DayKind.COMMITTED

        return replace(
            ctx.empty_stats(kind),
            delay_minutes=delay,
            overtime_minutes=raw_overtime,
            net_overtime_minutes=net_overtime,
            working_minutes=check_out - check_in,
            early_departure_minutes=early_departure_deduction,
            delay_penalty_minutes=delay_penalty,
        )
