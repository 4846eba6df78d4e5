from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ...attendance.calculator import DailyStatsCalculator, records_by_employee
from ...attendance.model import AttendanceRecord
from ...common.numbers import round_half_up
from ...core.enums import AttendanceStatus, DayKind, EmploymentType
from ...core.exceptions import DomainError, MultipleActiveLoansError, ValidationError
from ...core.period import Period
from ...core.results import BatchResult, Failure
from ...schedules.resolver import ResolvedConfig
from ...workers.model import Worker
from ..model import Loan, PayrollRecord
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: monthly draft from net overtime, unexcused absences and loans.

    - hourly rate = basic / days base / hours base (0 without a basic salary)
    - overtime is paid only to factory-type workers
    - each unexcused absence costs one day rate plus day rate x branch penalty
    - the active loan's installment is deducted, capped at its remaining balance
    """

    def __init__(self, *, daily: DailyStatsCalculator | None = None):
        self._daily = daily or DailyStatsCalculator()

    def compute_payroll(
        self,
        workers: Iterable[Worker],
        records: Iterable[AttendanceRecord],
        loans: Iterable[Loan],
        period: Period,
        config: ResolvedConfig,
    ) -> BatchResult[PayrollRecord]:
        grouped = records_by_employee([r for r in records if period.contains(r.work_date)])
        active_loans: dict[str, list[Loan]] = {}
        for loan in loans:
            if loan.is_active:
                active_loans.setdefault(loan.employee_id, []).append(loan)

        items: list[PayrollRecord] = []
        failures: list[Failure] = []
        for worker in workers:
            try:
                items.append(
                    self.compute_for_worker(
                        worker,
                        grouped.get(worker.employee_id, []),
                        active_loans.get(worker.employee_id, []),
                        period,
                        config,
                    )
                )
            except DomainError as e:
                logger.warning("No payroll draft for %s in %s: %s", worker.employee_id, period, e)
                failures.append(
                    Failure(employee_id=worker.employee_id, error=e, work_date=getattr(e, "work_date", None))
                )

        logger.info("Payroll %s: %d drafts, %d failures", period, len(items), len(failures))
        return BatchResult(items=items, failures=failures)

    def compute_for_worker(
        self,
        worker: Worker,
        records: Sequence[AttendanceRecord],
        active_loans: Sequence[Loan],
        period: Period,
        config: ResolvedConfig,
    ) -> PayrollRecord:
        schedule = config.schedule_for(worker.branch)
        net_overtime_minutes = 0
        unexcused_absences = 0
        seen = set()

        for r in records:
            if r.employee_id != worker.employee_id or not period.contains(r.work_date):
                continue
            if r.work_date in seen:
                raise ValidationError(f"Duplicate record for employee {worker.employee_id} on {r.work_date}")
            seen.add(r.work_date)

            stats = self._daily.compute(r.work_date, schedule, config.holidays, r)
            if stats.kind == DayKind.UNDER_REVIEW:
                continue
            net_overtime_minutes += stats.net_overtime_minutes
            if r.status == AttendanceStatus.ABSENT_PENALTY:
                unexcused_absences += 1

        basic = float(worker.basic_salary or 0)
        days_base = schedule.payroll_days_base
        hourly_rate = basic / days_base / schedule.payroll_hours_base if basic > 0 else 0.0
        overtime_hours = net_overtime_minutes / 60

        overtime_value = 0
        if worker.employment_type == EmploymentType.FACTORY:
            overtime_value = round_half_up(overtime_hours * hourly_rate)

        day_rate = basic / days_base
        # both amounts are charged for the same absence
        absent_value = round_half_up(unexcused_absences * day_rate)
        penalty_value = round_half_up(unexcused_absences * day_rate * schedule.penalty_value)

        loan = self._active_loan(worker, active_loans)
        loan_deduction = 0.0
        if loan is not None:
            loan_deduction = max(0.0, min(loan.installment_per_month, loan.remaining))

        return PayrollRecord(
            employee_id=worker.employee_id,
            period=period,
            basic_salary=basic,
            overtime_hours=overtime_hours,
            overtime_value=overtime_value,
            absent_days=unexcused_absences,
            absent_value=absent_value,
            penalty_value=penalty_value,
            loan_deduction=loan_deduction,
            loan_id=loan.loan_id if loan else None,
            loan_version=loan.version if loan else None,
            max_loan_deduction=loan_deduction,
        )

    @staticmethod
    def _active_loan(worker: Worker, loans: Sequence[Loan]) -> Optional[Loan]:
        active = [l for l in loans if l.is_active and l.employee_id == worker.employee_id]
        if len(active) > 1:
            raise MultipleActiveLoansError(worker.employee_id, [l.loan_id for l in active])
        return active[0] if active else None
