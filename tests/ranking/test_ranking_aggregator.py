from __future__ import annotations

from datetime import date

import pytest

from attendance_engine.attendance.model import AttendanceRecord
from attendance_engine.core.enums import AttendanceStatus, Branch, Role
from attendance_engine.core.exceptions import ParseError
from attendance_engine.core.period import Period
from attendance_engine.ranking.aggregator import RankingAggregator
from attendance_engine.schedules.resolver import ScheduleResolver
from attendance_engine.workers.model import Worker

CONFIG = ScheduleResolver().resolve({})
FRIDAY = date(2025, 3, 7)


def _worker(eid, branch=Branch.OFFICE, role=Role.EMPLOYEE):
    return Worker(employee_id=eid, name=eid.upper(), role=role, branch=branch)


def _rec(eid, d, check_in=None, check_out=None, status=AttendanceStatus.PRESENT, **kw):
    return AttendanceRecord(employee_id=eid, work_date=d, status=status, check_in=check_in, check_out=check_out, **kw)


def test_scores_are_normalized_against_the_cohort():
    workers = [_worker("a"), _worker("b")]
    records = [
        _rec("a", FRIDAY, "10:00", "11:40"),  # 100 min of weekend overtime
        _rec("b", FRIDAY, "10:00", "10:50"),  # 50 min
    ]

    scores = RankingAggregator().rank(workers, records, CONFIG).items

    assert [s.employee_id for s in scores] == ["a", "b"]
    assert [s.overtime_points for s in scores] == pytest.approx([80, 40])
    assert [s.overtime_score for s in scores] == [100, 50]
    assert [s.score for s in scores] == [90, 45]
    assert [s.rank for s in scores] == [1, 2]
    assert scores[0].points_to_next_rank == 0
    assert scores[1].points_to_next_rank == 46
    assert scores[1].points_to_first == 46


def test_management_roles_are_not_ranked():
    workers = [
        _worker("boss", role=Role.OWNER),
        _worker("gm", role=Role.GENERAL_MANAGER),
        _worker("m", role=Role.MANAGER),
        _worker("om", role=Role.OFFICE_MANAGER),
        _worker("acc", role=Role.ACCOUNTANT),
        _worker("emp"),
    ]

    scores = RankingAggregator().rank(workers, [], CONFIG).items

    assert sorted(s.employee_id for s in scores) == ["acc", "emp"]


def test_under_review_records_contribute_nothing():
    workers = [_worker("a")]
    records = [_rec("a", FRIDAY, "06:00", "22:00", status=AttendanceStatus.UNDER_REVIEW)]

    score = RankingAggregator().rank(workers, records, CONFIG).items[0]

    assert score.total_net_overtime == 0
    assert score.total_worked_minutes == 0
    assert score.working_days == 0
    assert score.score == 0


def test_unexcused_absence_penalty_comes_from_the_worker_branch():
    workers = [_worker("f", branch=Branch.FACTORY)]
    records = [
        _rec("f", date(2025, 3, 3), "08:00", "16:00"),
        _rec("f", date(2025, 3, 4), status=AttendanceStatus.ABSENT_PENALTY),
        _rec("f", date(2025, 3, 5), status=AttendanceStatus.LEAVE),
    ]

    score = RankingAggregator().rank(workers, records, CONFIG).items[0]

    assert score.working_days == 3
    assert score.unexcused_absences == 1
    assert score.authorized_leaves == 1
    assert score.days_present == 1
    assert score.penalty_points == 1
    # commitment 10 + attendance 10 - penalty 1
    assert score.score == 19


def test_weekend_records_do_not_count_as_working_days():
    workers = [_worker("a")]
    records = [_rec("a", date(2025, 3, 8), status=AttendanceStatus.ABSENT_PENALTY)]  # Saturday

    score = RankingAggregator().rank(workers, records, CONFIG).items[0]

    assert score.working_days == 0
    assert score.unexcused_absences == 0


def test_equal_scores_are_ordered_by_net_overtime():
    config = ScheduleResolver().resolve({"weightOvertime": 0, "weightCommitment": 0.5, "weightAbsence": 0.5})
    monday = date(2025, 3, 3)
    workers = [_worker("a"), _worker("b")]
    records = [
        _rec("a", monday, "09:00", "17:00"),
        _rec("b", monday, "08:30", "16:30", early_departure_permission=True),
    ]

    scores = RankingAggregator(honor_configured_weights=True).rank(workers, records, config).items

    assert [s.score for s in scores] == [100, 100]
    assert [s.employee_id for s in scores] == ["b", "a"]
    assert scores[1].points_to_next_rank == 1


def test_configured_weights_are_ignored_by_default():
    config = ScheduleResolver().resolve({"weightOvertime": 0, "weightCommitment": 0.5, "weightAbsence": 0.5})

    assert RankingAggregator().weights_for(config).overtime == 80


def test_bad_record_drops_only_its_worker():
    monday = date(2025, 3, 3)
    workers = [_worker("a"), _worker("b")]
    records = [_rec("a", monday, "9am", "17:00"), _rec("b", monday, "09:00", "17:00")]

    result = RankingAggregator().rank(workers, records, CONFIG)

    assert [s.employee_id for s in result.items] == ["b"]
    assert result.failed_employee_ids() == {"a"}
    assert isinstance(result.failures[0].error, ParseError)


def test_period_limits_the_records():
    workers = [_worker("a")]
    records = [_rec("a", FRIDAY, "10:00", "11:00"), _rec("a", date(2025, 4, 4), "10:00", "12:00")]

    score = RankingAggregator().rank(workers, records, CONFIG, period=Period(2025, 3)).items[0]

    assert score.total_net_overtime == 60


def test_empty_cohort_gives_empty_ranking():
    assert RankingAggregator().rank([], [], CONFIG).items == []
