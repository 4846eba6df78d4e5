from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date, month_dates
from ..core.exceptions import DomainError, ValidationError
from ..core.results import BatchResult, Failure
from ..schedules.model import BranchSchedule, HolidayCalendar
from ..schedules.resolver import ResolvedConfig
from ..workers.model import Worker
from .factory import ClassificationRuleFactory
from .model import AttendanceRecord, DailyStats
from .rules.base import DayContext

logger = logging.getLogger(__name__)


class DailyStatsCalculator:
    """Classify one calendar day of one worker.

    Pure: the same inputs always give the same ``DailyStats`` and nothing is
    cached between calls.
    """

    def __init__(self, *, rule_factory: ClassificationRuleFactory | None = None):
        self._factory = rule_factory or ClassificationRuleFactory()

    def compute(
        self,
        work_date: date | str,
        schedule: BranchSchedule,
        holidays: HolidayCalendar,
        record: Optional[AttendanceRecord] = None,
    ) -> DailyStats:
        work_date = coerce_date(work_date)
        if record is not None and record.work_date != work_date:
            raise ValidationError(
                f"Record of employee {record.employee_id} is dated {record.work_date}, not {work_date}"
            )
        ctx = DayContext(work_date=work_date, schedule=schedule, holidays=holidays, record=record)
        rule = self._factory.for_day(ctx)
        return rule.evaluate(ctx)

    def compute_for_worker(
        self,
        worker: Worker,
        record: AttendanceRecord,
        config: ResolvedConfig,
    ) -> DailyStats:
        return self.compute(record.work_date, config.schedule_for(worker.branch), config.holidays, record)

    def compute_many(
        self,
        workers: Iterable[Worker],
        records: Iterable[AttendanceRecord],
        config: ResolvedConfig,
    ) -> BatchResult[DailyStats]:
        """Stats for every record; bad records are reported, not raised."""
        by_id = {w.employee_id: w for w in workers}
        items: list[DailyStats] = []
        failures: list[Failure] = []
        seen: set[tuple[str, date]] = set()

        for record in records:
            key = (record.employee_id, record.work_date)
            try:
                if key in seen:
                    raise ValidationError(
                        f"Duplicate record for employee {record.employee_id} on {record.work_date}"
                    )
                seen.add(key)
                worker = by_id.get(record.employee_id)
                if worker is None:
                    raise ValidationError(f"Unknown employee {record.employee_id}")
                items.append(self.compute_for_worker(worker, record, config))
            except DomainError as e:
                logger.warning("Skipping record %s/%s: %s", record.employee_id, record.work_date, e)
                failures.append(Failure(employee_id=record.employee_id, work_date=record.work_date, error=e))

        return BatchResult(items=items, failures=failures)

    def month_calendar(
        self,
        worker: Worker,
        year: int,
        month: int,
        records: Iterable[AttendanceRecord],
        config: ResolvedConfig,
    ) -> BatchResult[DailyStats]:
        """One entry per calendar day of the month, with or without a record."""
        schedule = config.schedule_for(worker.branch)
        by_date: Mapping[date, AttendanceRecord] = {
            r.work_date: r for r in records if r.employee_id == worker.employee_id
        }
        items: list[DailyStats] = []
        failures: list[Failure] = []

        for d in month_dates(year, month):
            try:
                items.append(self.compute(d, schedule, config.holidays, by_date.get(d)))
            except DomainError as e:
                logger.warning("Calendar day %s of %s failed: %s", d, worker.employee_id, e)
                failures.append(Failure(employee_id=worker.employee_id, work_date=d, error=e))
                # shown as if no record existed
                items.append(self.compute(d, schedule, config.holidays))

        return BatchResult(items=items, failures=failures)


def records_by_employee(records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    out: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        out.setdefault(r.employee_id, []).append(r)
    return out
