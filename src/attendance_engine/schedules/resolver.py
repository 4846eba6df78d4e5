"""Resolve stored (possibly partial) configuration into complete schedules.

Stored configuration looks like::

    {
        "gracePeriodMinutes": 15,
        "penaltyValue": 1,
        "weightOvertime": 0.8, "weightCommitment": 0.1, "weightAbsence": 0.1,
        "holidays": [{"name": "...", "startDate": "2025-04-20", "endDate": "2025-04-21"}],
        "office": {"workStartTime": "09:00", "weekendDays": [5, 6], ...},
        "factory": {...},
    }

Every field of a branch is taken from the branch block, then (for the grace
period and penalty multiplier only) from the global block, then from the
hard defaults in :mod:`core.constants`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, parse_time_of_day
from ..core.constants import FACTORY_DEFAULTS, OFFICE_DEFAULTS
from ..core.enums import Branch
from ..core.exceptions import ConfigurationError
from ..ranking.model import ScoreWeights
from .model import BranchSchedule, Holiday, HolidayCalendar

logger = logging.getLogger(__name__)

BRANCH_DEFAULTS: dict[Branch, Mapping[str, Any]] = {
    Branch.OFFICE: OFFICE_DEFAULTS,
    Branch.FACTORY: FACTORY_DEFAULTS,
}

# Fields a global value may fill in when the branch block lacks them.
_GLOBAL_FALLBACK_FIELDS = ("gracePeriodMinutes", "penaltyValue")


@dataclass(frozen=True)
class ResolvedConfig:
    schedules: Mapping[Branch, BranchSchedule]
    holidays: HolidayCalendar
    configured_weights: ScoreWeights
    default_branch: Branch = Branch.OFFICE

    def schedule_for(self, branch: Branch | str | None) -> BranchSchedule:
        """Schedule of ``branch``; unknown or missing branches use the default one."""
        key: Optional[Branch]
        try:
            key = Branch(branch) if branch is not None else None
        except ValueError:
            key = None
        if key is None or key not in self.schedules:
            logger.debug("No schedule for branch %r, using %s", branch, self.default_branch.value)
            return self.schedules[self.default_branch]
        return self.schedules[key]


class ScheduleResolver:
    def __init__(self, *, default_branch: Branch = Branch.OFFICE):
        self._default_branch = default_branch

    def resolve(self, raw: Optional[Mapping[str, Any]] = None) -> ResolvedConfig:
        raw = raw or {}
        if not isinstance(raw, Mapping):
            raise ConfigurationError("Configuration must be a mapping")

        schedules = {branch: self._resolve_branch(branch, raw) for branch in Branch}
        holidays = HolidayCalendar(self._resolve_holiday(h) for h in (raw.get("holidays") or ()))
        weights = ScoreWeights.from_config(
            overtime=raw.get("weightOvertime"),
            commitment=raw.get("weightCommitment"),
            absence=raw.get("weightAbsence"),
        )
        logger.debug("Resolved config: %d holidays, branches=%s", len(holidays), [b.value for b in schedules])
        return ResolvedConfig(
            schedules=schedules,
            holidays=holidays,
            configured_weights=weights,
            default_branch=self._default_branch,
        )

    def _resolve_branch(self, branch: Branch, raw: Mapping[str, Any]) -> BranchSchedule:
        block = raw.get(branch.value) or {}
        if not isinstance(block, Mapping):
            raise ConfigurationError(f"Branch config for {branch.value} must be a mapping")
        defaults = BRANCH_DEFAULTS[branch]

        def pick(name: str):
            value = block.get(name)
            if value is None and name in _GLOBAL_FALLBACK_FIELDS:
                value = raw.get(name)
            return defaults[name] if value is None else value

        try:
            start = parse_time_of_day(pick("workStartTime"))
            end = parse_time_of_day(pick("workEndTime"))
            weekend_days = frozenset(int(d) for d in pick("weekendDays"))
            days_base = int(pick("payrollDaysBase"))
            hours_base = int(pick("payrollHoursBase"))
            grace = int(pick("gracePeriodMinutes"))
            penalty = float(pick("penaltyValue"))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"{branch.value}: {e}") from e

        if any(d < 0 or d > 6 for d in weekend_days):
            raise ConfigurationError(f"{branch.value}: weekend days must be between 0 and 6")
        if days_base <= 0 or hours_base <= 0:
            raise ConfigurationError(f"{branch.value}: payroll bases must be positive")
        if grace < 0 or penalty < 0:
            raise ConfigurationError(f"{branch.value}: grace period and penalty must not be negative")

        return BranchSchedule(
            branch=branch,
            work_start_time=start,
            work_end_time=end,
            weekend_days=weekend_days,
            grace_period_minutes=grace,
            penalty_value=penalty,
            payroll_days_base=days_base,
            payroll_hours_base=hours_base,
        )

    @staticmethod
    def _resolve_holiday(raw: Mapping[str, Any]) -> Holiday:
        try:
            start = coerce_date(raw["startDate"])
            end = coerce_date(raw.get("endDate") or raw["startDate"])
        except (KeyError, ValueError) as e:
            raise ConfigurationError(f"Invalid holiday {raw!r}") from e
        if end < start:
            raise ConfigurationError(f"Holiday {raw.get('name')!r} ends before it starts")
        return Holiday(name=str(raw.get("name") or ""), start_date=start, end_date=end)
