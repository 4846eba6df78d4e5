from __future__ import annotations

from .model import EmployeeScore


def performance_review(score: EmployeeScore) -> str:
    """Short narrative of a ranked score, for dashboards and monthly reports."""
    parts = []
    if score.rank == 1:
        parts.append("Delivered an outstanding month and tops the overall ranking,")
    elif score.score >= 90:
        parts.append(f"Scored {score.score} points, an excellent result,")
    else:
        parts.append(f"Scored {score.score} points,")

    if score.overtime_score >= 95:
        parts.append("driven by the highest overtime in the company,")
    elif score.overtime_score >= 70:
        parts.append("with good overtime compared to the top performer,")
    elif score.overtime_score >= 40:
        parts.append("with average overtime compared to the top performer,")
    else:
        parts.append("held back mainly by low overtime compared to the most productive colleague,")

    if score.unexcused_absences > 0:
        absence = f"while {score.unexcused_absences} day(s) of unexcused absence lowered the final result"
        if score.penalty_points > 0:
            absence += f" ({score.penalty_points:g} penalty points applied)"
        parts.append(absence + ",")
    elif score.absence_score >= 98:
        parts.append("with full attendance and no recorded absences,")

    if score.total_delay > 60:
        parts.append("although repeated late arrivals partly reduced the commitment rating.")
    elif score.total_delay > 0:
        parts.append("with a few minutes of minor lateness.")
    else:
        parts.append("and excellent punctuality.")

    result = " ".join(parts)
    if result.endswith(","):
        result = result[:-1] + "."
    return result
