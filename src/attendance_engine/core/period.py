from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .constants import QUARTERLY_MONTHS
from .exceptions import ValidationError


@dataclass(frozen=True)
class Period:
    """A calendar month; ``month`` is 1-12."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= int(self.month) <= 12:
            raise ValidationError(f"month {self.month} must be between 1 and 12")

    def contains(self, d: date) -> bool:
        return d.year == self.year and d.month == self.month

    @property
    def is_quarterly(self) -> bool:
        """Months where quarterly incentives are paid out."""
        return self.month in QUARTERLY_MONTHS

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
