from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .rules.absence_rule import AbsentPenaltyRule, IncompleteRecordRule
from .rules.base import ClassificationRule, DayContext
from .rules.holiday_work_rule import HolidayWorkRule
from .rules.review_rule import UnderReviewRule
from .rules.working_day_rule import WorkingDayRule


def default_rules() -> tuple[ClassificationRule, ...]:
    """Status precedence, first match wins."""
    return (
        UnderReviewRule(),
        AbsentPenaltyRule(),
        IncompleteRecordRule(),
        HolidayWorkRule(),
        WorkingDayRule(),
    )


@dataclass(frozen=True)
class ClassificationRuleFactory:
    """Factory Pattern: choose the rule that classifies a given day."""

    rules: Sequence[ClassificationRule] = field(default_factory=default_rules)

    def for_day(self, ctx: DayContext) -> ClassificationRule:
        for rule in self.rules:
            if rule.matches(ctx):
                return rule
        raise LookupError(f"No classification rule matches {ctx.work_date}")
