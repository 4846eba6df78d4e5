from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Loan, LoanDelta


class LoanRepository(Protocol):
    def get(self, loan_id: str) -> Optional[Loan]:
        raise NotImplementedError

    def list_active(self, employee_id: Optional[str] = None) -> Sequence[Loan]:
        raise NotImplementedError

    def apply_deduction(self, *, loan_id: str, amount: float, expected_version: int) -> LoanDelta:
        """Add ``amount`` to the loan's paid amount in one atomic step.

        Must raise ``StaleLoanError`` (and change nothing) if the stored
        version differs from ``expected_version`` or the loan is no longer
        active. The applied amount never exceeds the remaining balance.
        """

        raise NotImplementedError
