from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.enums import LoanStatus
from ..core.exceptions import StaleLoanError, ValidationError
from .model import Loan, LoanDelta


class InMemoryLoanRepository:
    """Loan store kept in a dict; one lock guards every read and write."""

    def __init__(self, loans: Iterable[Loan] = ()):
        self._loans: dict[str, Loan] = {l.loan_id: l for l in loans}
        self._lock = threading.Lock()

    def get(self, loan_id: str) -> Optional[Loan]:
        with self._lock:
            return self._loans.get(loan_id)

    def list_active(self, employee_id: Optional[str] = None) -> Sequence[Loan]:
        with self._lock:
            loans = list(self._loans.values())
        return [
            l for l in loans if l.is_active and (employee_id is None or l.employee_id == employee_id)
        ]

    def add(self, loan: Loan) -> None:
        with self._lock:
            if loan.loan_id in self._loans:
                raise ValidationError(f"Loan {loan.loan_id} already exists")
            self._loans[loan.loan_id] = loan

    def apply_deduction(self, *, loan_id: str, amount: float, expected_version: int) -> LoanDelta:
        if amount < 0:
            raise ValidationError("Loan deduction must not be negative")
        with self._lock:
            loan = self._loans.get(loan_id)
            if loan is None:
                raise StaleLoanError(f"Loan {loan_id} no longer exists")
            if loan.version != expected_version:
                raise StaleLoanError(
                    f"Loan {loan_id} changed since it was read (version {expected_version} -> {loan.version})"
                )
            if not loan.is_active:
                raise StaleLoanError(f"Loan {loan_id} is already completed")

            applied = min(amount, loan.remaining)
            paid_after = loan.paid_amount + applied
            status_after = LoanStatus.COMPLETED if paid_after >= loan.total_amount else LoanStatus.ACTIVE
            self._loans[loan_id] = replace(loan, paid_amount=paid_after, status=status_after, version=loan.version + 1)

        return LoanDelta(
            loan_id=loan_id,
            employee_id=loan.employee_id,
            applied_amount=applied,
            paid_amount_before=loan.paid_amount,
            paid_amount_after=paid_after,
            status_after=status_after,
        )
