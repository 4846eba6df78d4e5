from attendance_engine.ranking.model import EmployeeScore
from attendance_engine.ranking.review import performance_review


def _score(**kw):
    base = dict(
        employee_id="a",
        name="A",
        position="Technician",
        score=70,
        commitment_score=80,
        overtime_score=50,
        absence_score=100,
        total_net_overtime=300,
        total_raw_overtime=320,
        total_delay=0,
        total_worked_minutes=9000,
        days_present=20,
        working_days=20,
        unexcused_absences=0,
        authorized_leaves=0,
        penalty_points=0,
        rank=3,
    )
    base.update(kw)
    return EmployeeScore(**base)


def test_top_ranked_review():
    text = performance_review(_score(rank=1, score=95, overtime_score=100))

    assert text.startswith("Delivered an outstanding month")
    assert "highest overtime" in text
    assert text.endswith("excellent punctuality.")


def test_review_mentions_absences_and_penalty():
    text = performance_review(_score(unexcused_absences=2, penalty_points=2, total_delay=90))

    assert "2 day(s) of unexcused absence" in text
    assert "(2 penalty points applied)" in text
    assert "repeated late arrivals" in text


def test_review_of_full_attendance():
    text = performance_review(_score(overtime_score=20, total_delay=5))

    assert text.startswith("Scored 70 points,")
    assert "low overtime" in text
    assert "no recorded absences" in text
    assert text.endswith("minor lateness.")
