from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MAX_SCORE, WEIGHT_ABSENCE, WEIGHT_COMMITMENT, WEIGHT_OVERTIME


@dataclass(frozen=True)
class ScoreWeights:
    """Points each component contributes to the 100-point score."""

    overtime: float = WEIGHT_OVERTIME
    commitment: float = WEIGHT_COMMITMENT
    absence: float = WEIGHT_ABSENCE

    @classmethod
    def fixed(cls) -> "ScoreWeights":
        return cls()

    @classmethod
    def from_config(
        cls,
        *,
        overtime: Optional[float],
        commitment: Optional[float],
        absence: Optional[float],
    ) -> "ScoreWeights":
        """Weights as stored; fractions (summing to about 1) are scaled to points."""
        if overtime is None and commitment is None and absence is None:
            return cls.fixed()
        values = [
            float(overtime if overtime is not None else WEIGHT_OVERTIME / MAX_SCORE),
            float(commitment if commitment is not None else WEIGHT_COMMITMENT / MAX_SCORE),
            float(absence if absence is not None else WEIGHT_ABSENCE / MAX_SCORE),
        ]
        if sum(values) <= 1.0 + 1e-9:
            values = [v * MAX_SCORE for v in values]
        return cls(overtime=values[0], commitment=values[1], absence=values[2])


@dataclass(frozen=True)
class EmployeeScore:
    employee_id: str
    name: str
    position: str
    score: int
    commitment_score: int
    overtime_score: int
    absence_score: int
    total_net_overtime: int
    total_raw_overtime: int
    total_delay: int
    total_worked_minutes: int
    days_present: int
    working_days: int
    unexcused_absences: int
    authorized_leaves: int
    penalty_points: float
    overtime_points: float = 0.0
    commitment_points: float = 0.0
    absence_points: float = 0.0
    rank: int = 0
    points_to_next_rank: int = 0
    points_to_first: int = 0
