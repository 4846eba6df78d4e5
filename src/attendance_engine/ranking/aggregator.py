from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..attendance.calculator import DailyStatsCalculator, records_by_employee
from ..attendance.model import AttendanceRecord
from ..common.numbers import clamp, round_half_up
from ..core.constants import MAX_SCORE
from ..core.enums import AttendanceStatus, DayKind
from ..core.exceptions import DomainError, ValidationError
from ..core.period import Period
from ..core.results import BatchResult, Failure
from ..schedules.resolver import ResolvedConfig
from ..workers.model import Worker
from .model import EmployeeScore, ScoreWeights

logger = logging.getLogger(__name__)


@dataclass
class _Totals:
    worker: Worker
    penalty_value: float
    total_delay: int = 0
    total_raw_overtime: int = 0
    total_net_overtime: int = 0
    total_worked_minutes: int = 0
    working_days: int = 0
    unexcused_absences: int = 0
    authorized_leaves: int = 0
    days_present: int = 0


class RankingAggregator:
    """Score and rank a cohort relative to its own best performers.

    Each component is normalized against the cohort maximum (floored at 1),
    weighted, and the unexcused-absence penalty of the worker's branch is
    subtracted. Workers in management roles are not ranked.
    """

    def __init__(
        self,
        *,
        daily: DailyStatsCalculator | None = None,
        honor_configured_weights: bool = False,
    ):
        self._daily = daily or DailyStatsCalculator()
        self._honor_configured_weights = honor_configured_weights

    def weights_for(self, config: ResolvedConfig) -> ScoreWeights:
        if self._honor_configured_weights:
            return config.configured_weights
        return ScoreWeights.fixed()

    def rank(
        self,
        cohort: Iterable[Worker],
        records: Iterable[AttendanceRecord],
        config: ResolvedConfig,
        *,
        period: Optional[Period] = None,
    ) -> BatchResult[EmployeeScore]:
        records = [r for r in records if period is None or period.contains(r.work_date)]
        grouped = records_by_employee(records)
        failures: list[Failure] = []
        totals: list[_Totals] = []

        for worker in cohort:
            if not worker.is_rankable:
                continue
            try:
                totals.append(self._fold(worker, grouped.get(worker.employee_id, []), config))
            except DomainError as e:
                logger.warning("Worker %s left out of ranking: %s", worker.employee_id, e)
                failures.append(
                    Failure(employee_id=worker.employee_id, error=e, work_date=getattr(e, "work_date", None))
                )

        scores = self._score(totals, self.weights_for(config))
        return BatchResult(items=self._assign_ranks(scores), failures=failures)

    def _fold(self, worker: Worker, records: list[AttendanceRecord], config: ResolvedConfig) -> _Totals:
        schedule = config.schedule_for(worker.branch)
        t = _Totals(worker=worker, penalty_value=schedule.penalty_value)
        seen = set()

        for r in records:
            if r.work_date in seen:
                raise ValidationError(f"Duplicate record for employee {worker.employee_id} on {r.work_date}")
            seen.add(r.work_date)

            stats = self._daily.compute(r.work_date, schedule, config.holidays, r)
            if stats.kind == DayKind.UNDER_REVIEW:
                continue

            t.total_delay += stats.delay_minutes
            t.total_raw_overtime += stats.overtime_minutes
            t.total_net_overtime += stats.net_overtime_minutes
            t.total_worked_minutes += stats.working_minutes

            if stats.is_working_day:
                t.working_days += 1
                if r.status == AttendanceStatus.ABSENT_PENALTY:
                    t.unexcused_absences += 1
                elif r.status == AttendanceStatus.LEAVE:
                    t.authorized_leaves += 1
                elif r.check_in or r.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE):
                    t.days_present += 1
        return t

    @staticmethod
    def _score(totals: list[_Totals], weights: ScoreWeights) -> list[EmployeeScore]:
        max_net_overtime = max([t.total_net_overtime for t in totals] + [1])
        max_worked = max([t.total_worked_minutes for t in totals] + [1])
        max_present = max([t.days_present for t in totals] + [1])

        def percent(points: float, weight: float) -> int:
            return round_half_up(points / weight * 100) if weight else 0

        scores = []
        for t in totals:
            overtime = t.total_net_overtime / max_net_overtime * weights.overtime
            commitment = t.total_worked_minutes / max_worked * weights.commitment
            absence = t.days_present / max_present * weights.absence
            manual_penalty = t.unexcused_absences * t.penalty_value
            score = round_half_up(clamp(overtime + commitment + absence - manual_penalty, 0, MAX_SCORE))

            scores.append(
                EmployeeScore(
                    employee_id=t.worker.employee_id,
                    name=t.worker.name,
                    position=t.worker.position,
                    score=score,
                    commitment_score=percent(commitment, weights.commitment),
                    overtime_score=percent(overtime, weights.overtime),
                    absence_score=percent(absence, weights.absence),
                    total_net_overtime=t.total_net_overtime,
                    total_raw_overtime=t.total_raw_overtime,
                    total_delay=t.total_delay,
                    total_worked_minutes=t.total_worked_minutes,
                    days_present=t.days_present,
                    working_days=t.working_days,
                    unexcused_absences=t.unexcused_absences,
                    authorized_leaves=t.authorized_leaves,
                    penalty_points=manual_penalty,
                    overtime_points=overtime,
                    commitment_points=commitment,
                    absence_points=absence,
                )
            )
        return scores

    @staticmethod
    def _assign_ranks(scores: list[EmployeeScore]) -> list[EmployeeScore]:
        ordered = sorted(scores, key=lambda s: (-s.score, -s.total_net_overtime))
        if not ordered:
            return []
        first = ordered[0].score
        ranked = []
        for idx, s in enumerate(ordered):
            if idx == 0:
                ranked.append(replace(s, rank=1, points_to_next_rank=0, points_to_first=0))
            else:
                ranked.append(
                    replace(
                        s,
                        rank=idx + 1,
                        points_to_next_rank=ordered[idx - 1].score - s.score + 1,
                        points_to_first=first - s.score + 1,
                    )
                )
        return ranked
