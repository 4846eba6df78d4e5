from __future__ import annotations

from ...core.enums import AttendanceStatus, DayKind
from ..model import DailyStats
from .base import ClassificationRule, DayContext


class UnderReviewRule(ClassificationRule):
    """Records still under review count for nothing, whatever their times."""

    name = "under_review"

    def matches(self, ctx: DayContext) -> bool:
        return ctx.status == AttendanceStatus.UNDER_REVIEW

    def evaluate(self, ctx: DayContext) -> DailyStats:
        return ctx.empty_stats(DayKind.UNDER_REVIEW)
