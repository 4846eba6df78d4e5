from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import PayrollStatus
from ..core.exceptions import DomainError, PayrollStateError, ValidationError
from ..core.period import Period
from ..core.results import BatchResult, Failure
from ..schedules.resolver import ResolvedConfig
from ..workers.model import Worker
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import LoanDelta, PayrollRecord
from .repository import LoanRepository

logger = logging.getLogger(__name__)

# Fields a reviewer may change on a draft before it is committed.
OVERRIDABLE_FIELDS = frozenset(
    {
        "overtime_value",
        "incentives",
        "commissions",
        "bonuses",
        "absent_value",
        "penalty_value",
        "deductions",
        "loan_deduction",
        "insurance",
    }
)


@dataclass(frozen=True)
class CommitResult:
    records: list[PayrollRecord] = field(default_factory=list)
    loan_deltas: list[LoanDelta] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)


class PayrollService:
    """Draft, review and commit monthly payroll."""

    def __init__(self, loans: LoanRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._loans = loans
        self._calculator = calculator or StandardPayrollCalculator()

    def generate(
        self,
        workers: Iterable[Worker],
        records: Iterable[AttendanceRecord],
        period: Period,
        config: ResolvedConfig,
    ) -> BatchResult[PayrollRecord]:
        return self._calculator.compute_payroll(workers, records, self._loans.list_active(), period, config)

    @staticmethod
    def apply_override(record: PayrollRecord, **changes: float) -> PayrollRecord:
        """Manual edit of a draft; net salary follows from the new values.

        The loan deduction can only be lowered, never raised above what the
        draft computed from the loan's remaining balance.

        Incentives are only paid in quarterly months (March, June, September,
        December).
        """
        if record.is_paid:
            raise PayrollStateError(f"Payroll of {record.employee_id} for {record.period} is already paid")

        unknown = set(changes) - OVERRIDABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot override: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            if value is None or value < 0:
                raise ValidationError(f"{name} must not be negative")

        if changes.get("incentives") and not record.period.is_quarterly:
            raise ValidationError(f"Incentives are paid in quarterly months only, not in {record.period}")

        loan_deduction = changes.get("loan_deduction")
        if loan_deduction is not None and loan_deduction > record.max_loan_deduction:
            raise ValidationError(
                f"Loan deduction {loan_deduction} exceeds the allowed {record.max_loan_deduction}"
            )
        return replace(record, **changes)

    def commit(self, records: Sequence[PayrollRecord]) -> CommitResult:
        """Mark drafts paid and apply their loan deductions.

        Each record commits on its own: a record whose loan changed since the
        draft was generated stays a draft and is reported as a failure.
        """
        result = CommitResult()
        for record in records:
            try:
                paid, delta = self._commit_one(record)
            except DomainError as e:
                logger.warning("Payroll of %s for %s not committed: %s", record.employee_id, record.period, e)
                result.failures.append(Failure(employee_id=record.employee_id, error=e))
                continue
            result.records.append(paid)
            if delta is not None:
                result.loan_deltas.append(delta)

        logger.info("Committed %d payroll records, %d failures", len(result.records), len(result.failures))
        return result

    def _commit_one(self, record: PayrollRecord) -> tuple[PayrollRecord, Optional[LoanDelta]]:
        if record.is_paid:
            raise PayrollStateError(f"Payroll of {record.employee_id} for {record.period} is already paid")

        delta = None
        if record.loan_deduction > 0:
            if record.loan_id is None or record.loan_version is None:
                raise ValidationError(f"Payroll of {record.employee_id} deducts a loan but names none")
            delta = self._loans.apply_deduction(
                loan_id=record.loan_id,
                amount=record.loan_deduction,
                expected_version=record.loan_version,
            )
            if delta.applied_amount != record.loan_deduction:
                record = replace(record, loan_deduction=delta.applied_amount)

        return replace(record, status=PayrollStatus.PAID), delta
