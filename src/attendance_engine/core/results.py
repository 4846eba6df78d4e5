from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Generic, Optional, TypeVar

from .exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Failure:
    """One record or worker that could not be processed."""

    employee_id: Optional[str]
    error: DomainError
    work_date: Optional[date] = None

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class BatchResult(Generic[T]):
    """Partial result set: everything that succeeded plus what did not."""

    items: list[T] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_employee_ids(self) -> set[str]:
        return {f.employee_id for f in self.failures if f.employee_id is not None}
