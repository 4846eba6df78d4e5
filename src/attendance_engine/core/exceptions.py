from __future__ import annotations

from datetime import date
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(ValidationError):
    """Raised when a time-of-day string on a record cannot be parsed."""

    def __init__(self, value: object, *, employee_id: Optional[str] = None, work_date: Optional[date] = None):
        self.value = value
        self.employee_id = employee_id
        self.work_date = work_date
        where = ""
        if employee_id is not None or work_date is not None:
            where = f" (employee={employee_id}, date={work_date})"
        super().__init__(f"Invalid time of day {value!r}{where}")


class ConfigurationError(DomainError):
    """Raised when stored configuration or reference data is inconsistent."""


class MultipleActiveLoansError(ConfigurationError):
    """Raised when a worker has more than one active loan."""

    def __init__(self, employee_id: str, loan_ids: list[str]):
        self.employee_id = employee_id
        self.loan_ids = loan_ids
        super().__init__(f"Employee {employee_id} has {len(loan_ids)} active loans: {', '.join(loan_ids)}")


class PayrollStateError(DomainError):
    """Raised when a payroll record is changed after it was paid."""


class StaleLoanError(DomainError):
    """Raised when a loan changed since the payroll draft read it."""
