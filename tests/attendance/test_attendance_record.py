from datetime import date

import pytest

from attendance_engine.attendance.model import AttendanceRecord
from attendance_engine.core.enums import AttendanceStatus
from attendance_engine.core.exceptions import ValidationError


def test_from_dict_reads_stored_shape():
    rec = AttendanceRecord.from_dict(
        {
            "id": "1-2025-03-03",
            "employeeId": "1",
            "date": "2025-03-03",
            "checkIn": "08:55",
            "checkOut": "17:05",
            "status": "present",
            "earlyDeparturePermission": True,
        }
    )

    assert rec.work_date == date(2025, 3, 3)
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.early_departure_permission is True
    assert rec.has_full_times


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict({"employeeId": "1", "date": "2025-03-03", "status": "holiday"})


def test_bad_date_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict({"employeeId": "1", "date": "03/03/2025", "status": "present"})


@pytest.mark.parametrize(
    "stored, expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("false", False),
        ("0", False),
        ("1", True),
        (0, False),
        (None, False),
    ],
)
def test_early_departure_permission_reads_stored_flag(stored, expected):
    rec = AttendanceRecord.from_dict(
        {"employeeId": "1", "date": "2025-03-03", "status": "present", "earlyDeparturePermission": stored}
    )

    assert rec.early_departure_permission is expected


def test_unreadable_early_departure_permission_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(
            {"employeeId": "1", "date": "2025-03-03", "status": "present", "earlyDeparturePermission": "maybe"}
        )
