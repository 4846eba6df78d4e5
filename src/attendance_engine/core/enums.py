from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Organisational role; decides ranking eligibility."""

    GENERAL_MANAGER = "general_manager"
    OWNER = "owner"
    MANAGER = "manager"
    OFFICE_MANAGER = "office_manager"
    ACCOUNTANT = "accountant"
    EMPLOYEE = "employee"


class Branch(str, Enum):
    OFFICE = "office"
    FACTORY = "factory"


class EmploymentType(str, Enum):
    """Governs whether overtime is monetized in payroll."""

    FACTORY = "factory"
    OFFICE = "office"
    SALES = "sales"
    OWNER = "owner"


class AttendanceStatus(str, Enum):
    """Closed set of statuses stored on an attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    WEEKEND = "weekend"
    LEAVE = "leave"
    ABSENT_PENALTY = "absent_penalty"
    UNDER_REVIEW = "under_review"


class DayKind(str, Enum):
    """Classification produced for one calendar day."""

    UNDER_REVIEW = "under_review"
    UNAUTHORIZED_ABSENCE = "unauthorized_absence"
    LEAVE = "leave"
    OFFICIAL_HOLIDAY = "official_holiday"
    WEEKLY_DAY_OFF = "weekly_day_off"
    ABSENT = "absent"
    WORK_ON_LEAVE = "work_on_leave"
    WORK_ON_OFFICIAL_HOLIDAY = "work_on_official_holiday"
    WORK_ON_WEEKEND = "work_on_weekend"
    LATE = "late"
    EARLY_DEPARTURE = "early_departure"
    COMMITTED = "committed"

    @property
    def label(self) -> str:
        return _DAY_KIND_LABELS[self]

    @property
    def is_holiday_work(self) -> bool:
        return self in (DayKind.WORK_ON_LEAVE, DayKind.WORK_ON_OFFICIAL_HOLIDAY, DayKind.WORK_ON_WEEKEND)


_DAY_KIND_LABELS = {
    DayKind.UNDER_REVIEW: "under review",
    DayKind.UNAUTHORIZED_ABSENCE: "unauthorized absence",
    DayKind.LEAVE: "leave",
    DayKind.OFFICIAL_HOLIDAY: "official holiday",
    DayKind.WEEKLY_DAY_OFF: "weekly day off",
    DayKind.ABSENT: "absent",
    DayKind.WORK_ON_LEAVE: "work on leave (overtime)",
    DayKind.WORK_ON_OFFICIAL_HOLIDAY: "work on official holiday (overtime)",
    DayKind.WORK_ON_WEEKEND: "work on weekend (overtime)",
    DayKind.LATE: "late",
    DayKind.EARLY_DEPARTURE: "early departure",
    DayKind.COMMITTED: "committed",
}


class LoanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class PayrollStatus(str, Enum):
    DRAFT = "draft"
    PAID = "paid"
