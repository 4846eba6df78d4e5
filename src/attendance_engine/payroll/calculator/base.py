from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from ...attendance.model import AttendanceRecord
from ...core.period import Period
from ...core.results import BatchResult
from ...schedules.resolver import ResolvedConfig
from ...workers.model import Worker
from ..model import Loan, PayrollRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_for_worker(
        self,
        worker: Worker,
        records: Sequence[AttendanceRecord],
        active_loans: Sequence[Loan],
        period: Period,
        config: ResolvedConfig,
    ) -> PayrollRecord:
        raise NotImplementedError

    @abstractmethod
    def compute_payroll(
        self,
        workers: Iterable[Worker],
        records: Iterable[AttendanceRecord],
        loans: Iterable[Loan],
        period: Period,
        config: ResolvedConfig,
    ) -> BatchResult[PayrollRecord]:
        raise NotImplementedError
