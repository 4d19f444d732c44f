"""Rule data structures and threshold tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional


class StudentCategory(str, Enum):
    SCHOOL = "SCHOOL"  # elementary school and up
    PRESCHOOL = "PRESCHOOL"

    @classmethod
    def parse(cls, value: Any) -> "StudentCategory":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown student category: {value!r}") from None


ONSET_WAIT_DAYS = 5
FEVER_WAIT_DAYS = {StudentCategory.SCHOOL: 2, StudentCategory.PRESCHOOL: 3}

CATEGORY_LABELS = {
    StudentCategory.SCHOOL: "小学生以上",
    StudentCategory.PRESCHOOL: "幼児（未就学児）",
}


def fever_wait_days(category: StudentCategory | str) -> int:
    """Days that must pass after fever resolution for the category."""
    return FEVER_WAIT_DAYS[StudentCategory.parse(category)]


def category_hint(category: StudentCategory | str) -> str:
    return f"解熱後{fever_wait_days(category)}日を経過"


@dataclass(frozen=True)
class CalculationResult:
    can_return_date: date
    reason: str
    days_from_onset: int
    days_from_fever: int
    is_criterion_a_met: bool
    is_criterion_b_met: bool


@dataclass(frozen=True)
class DayStatus:
    date: date
    day_num_from_onset: int
    day_num_from_fever: Optional[int]
    status: str  # "wait" or "ok"
    is_onset: bool
    is_fever_resolved: bool
    is_return_date: bool
