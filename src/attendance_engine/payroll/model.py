from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_enum, require_non_empty, require_non_negative, require_number
from ..core.enums import LoanStatus, PayrollStatus
from ..core.period import Period


@dataclass(frozen=True)
class Loan:
    """Salary advance repaid by monthly installments.

    ``version`` is bumped on every change so a commit working from an old
    read can be detected and rejected.
    """

    loan_id: str
    employee_id: str
    total_amount: float
    paid_amount: float
    installment_per_month: float
    status: LoanStatus = LoanStatus.ACTIVE
    version: int = 0

    @property
    def remaining(self) -> float:
        return max(0.0, self.total_amount - self.paid_amount)

    @property
    def is_active(self) -> bool:
        return self.status == LoanStatus.ACTIVE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Loan":
        return cls(
            loan_id=require_non_empty(data.get("id"), "id"),
            employee_id=require_non_empty(data.get("employeeId"), "employeeId"),
            total_amount=require_non_negative(require_number(data.get("totalAmount"), "totalAmount"), "totalAmount"),
            paid_amount=require_non_negative(require_number(data.get("paidAmount"), "paidAmount"), "paidAmount"),
            installment_per_month=require_non_negative(
                require_number(data.get("installmentPerMonth"), "installmentPerMonth"), "installmentPerMonth"
            ),
            status=require_enum(LoanStatus, data.get("status") or LoanStatus.ACTIVE, "status"),
            version=int(require_number(data.get("version"), "version")),
        )


@dataclass(frozen=True)
class LoanDelta:
    """Change applied to a loan when a payroll record was committed."""

    loan_id: str
    employee_id: str
    applied_amount: float
    paid_amount_before: float
    paid_amount_after: float
    status_after: LoanStatus


@dataclass(frozen=True)
class PayrollRecord:
    employee_id: str
    period: Period
    basic_salary: float
    overtime_hours: float = 0.0
    overtime_value: float = 0
    incentives: float = 0
    commissions: float = 0
    bonuses: float = 0
    absent_days: int = 0
    absent_value: float = 0
    penalty_value: float = 0
    deductions: float = 0
    loan_deduction: float = 0
    insurance: float = 0
    status: PayrollStatus = PayrollStatus.DRAFT
    loan_id: Optional[str] = None
    loan_version: Optional[int] = None
    max_loan_deduction: float = 0

    @property
    def gross(self) -> float:
        return self.basic_salary + self.overtime_value + self.incentives + self.commissions + self.bonuses

    @property
    def total_deductions(self) -> float:
        return self.absent_value + self.penalty_value + self.deductions + self.loan_deduction + self.insurance

    @property
    def net_salary(self) -> float:
        return self.gross - self.total_deductions

    @property
    def is_paid(self) -> bool:
        return self.status == PayrollStatus.PAID
