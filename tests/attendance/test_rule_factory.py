from datetime import date

import pytest

from attendance_engine.attendance.factory import ClassificationRuleFactory
from attendance_engine.attendance.model import AttendanceRecord
from attendance_engine.attendance.rules.absence_rule import AbsentPenaltyRule, IncompleteRecordRule
from attendance_engine.attendance.rules.base import DayContext
from attendance_engine.attendance.rules.holiday_work_rule import HolidayWorkRule
from attendance_engine.attendance.rules.review_rule import UnderReviewRule
from attendance_engine.attendance.rules.working_day_rule import WorkingDayRule
from attendance_engine.core.enums import AttendanceStatus, Branch
from attendance_engine.core.exceptions import ValidationError
from attendance_engine.schedules.resolver import ScheduleResolver

CONFIG = ScheduleResolver().resolve({})
OFFICE = CONFIG.schedule_for(Branch.OFFICE)


def _ctx(d, status, check_in="09:00", check_out="17:00"):
    record = AttendanceRecord(employee_id="e1", work_date=d, status=status, check_in=check_in, check_out=check_out)
    return DayContext(work_date=d, schedule=OFFICE, holidays=CONFIG.holidays, record=record)


def test_default_rule_order():
    names = [r.name for r in ClassificationRuleFactory().rules]

    assert names == ["under_review", "absent_penalty", "incomplete_record", "holiday_work", "working_day"]


def test_factory_picks_first_matching_rule():
    factory = ClassificationRuleFactory()
    monday = date(2025, 3, 3)
    friday = date(2025, 3, 7)

    assert isinstance(factory.for_day(_ctx(friday, AttendanceStatus.UNDER_REVIEW)), UnderReviewRule)
    assert isinstance(factory.for_day(_ctx(friday, AttendanceStatus.ABSENT_PENALTY)), AbsentPenaltyRule)
    assert isinstance(factory.for_day(_ctx(friday, AttendanceStatus.PRESENT, check_out=None)), IncompleteRecordRule)
    assert isinstance(factory.for_day(_ctx(friday, AttendanceStatus.PRESENT)), HolidayWorkRule)
    assert isinstance(factory.for_day(_ctx(monday, AttendanceStatus.PRESENT)), WorkingDayRule)


def test_each_rule_matches_independently():
    friday = date(2025, 3, 7)

    assert UnderReviewRule().matches(_ctx(friday, AttendanceStatus.UNDER_REVIEW))
    assert not UnderReviewRule().matches(_ctx(friday, AttendanceStatus.PRESENT))
    assert HolidayWorkRule().matches(_ctx(date(2025, 3, 3), AttendanceStatus.LEAVE))
    assert not HolidayWorkRule().matches(_ctx(date(2025, 3, 3), AttendanceStatus.PRESENT))
    assert IncompleteRecordRule().matches(DayContext(work_date=friday, schedule=OFFICE, holidays=CONFIG.holidays))


def test_worked_span_requires_both_times():
    ctx = _ctx(date(2025, 3, 3), AttendanceStatus.PRESENT, check_out=None)

    with pytest.raises(ValidationError):
        ctx.worked_span()
