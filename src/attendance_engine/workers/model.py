from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_enum, require_non_empty, require_non_negative, require_number
from ..core.constants import RANKING_EXEMPT_ROLES
from ..core.enums import Branch, EmploymentType, Role


@dataclass(frozen=True)
class Worker:
    """Domain entity: an employee as seen by the calculators.

    Note: plain data object, owned and mutated by the surrounding application.
    """

    employee_id: str
    name: str
    role: Role = Role.EMPLOYEE
    branch: Optional[Branch] = None
    employment_type: EmploymentType = EmploymentType.OFFICE
    basic_salary: float = 0
    position: str = ""

    @property
    def is_rankable(self) -> bool:
        return self.role not in RANKING_EXEMPT_ROLES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Worker":
        branch = data.get("branch")
        return cls(
            employee_id=require_non_empty(data.get("id"), "id"),
            name=str(data.get("name") or ""),
            role=require_enum(Role, data.get("role") or Role.EMPLOYEE, "role"),
            branch=require_enum(Branch, branch, "branch") if branch else None,
            employment_type=require_enum(
                EmploymentType, data.get("employmentType") or EmploymentType.OFFICE, "employmentType"
            ),
            basic_salary=require_non_negative(require_number(data.get("basicSalary"), "basicSalary"), "basicSalary"),
            position=str(data.get("position") or ""),
        )
