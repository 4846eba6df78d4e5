from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.validators import require_bool, require_enum, require_non_empty
from ..core.enums import AttendanceStatus, DayKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance for one date.

    ``check_in`` / ``check_out`` stay raw ``"HH:MM"`` strings; they are parsed
    by the calculator so a bad value can be reported against this record.
    """

    employee_id: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    early_departure_permission: bool = False
    note: Optional[str] = None

    @property
    def has_full_times(self) -> bool:
        return bool(self.check_in) and bool(self.check_out)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        try:
            work_date = coerce_date(data.get("date"))
        except (TypeError, ValueError):
            raise ValidationError(f"date {data.get('date')!r} is not YYYY-MM-DD") from None
        return cls(
            employee_id=require_non_empty(data.get("employeeId"), "employeeId"),
            work_date=work_date,
            status=require_enum(AttendanceStatus, data.get("status"), "status"),
            check_in=data.get("checkIn") or None,
            check_out=data.get("checkOut") or None,
            early_departure_permission=require_bool(data.get("earlyDeparturePermission"), "earlyDeparturePermission"),
            note=data.get("note"),
        )


@dataclass(frozen=True)
class DailyStats:
    """Derived, never stored: classification and minute counts of one day."""

    work_date: date
    kind: DayKind
    record: Optional[AttendanceRecord] = None
    is_weekend: bool = False
    is_official_holiday: bool = False
    delay_minutes: int = 0
    overtime_minutes: int = 0
    net_overtime_minutes: int = 0
    working_minutes: int = 0
    early_departure_minutes: int = 0
    delay_penalty_minutes: int = 0

    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def is_working_day(self) -> bool:
        """Neither a branch weekend day nor an official holiday."""
        return not self.is_weekend and not self.is_official_holiday
