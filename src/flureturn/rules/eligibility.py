"""Earliest school-return date under the influenza attendance rules.

Attendance is suspended until five days have passed since onset and two
days (three for preschoolers) have passed since the fever resolved. Day 0
is the onset or resolution day itself, so "five days passed" makes day 5
the last day of suspension and day 6 the first day back.
"""

from __future__ import annotations

from typing import Any, Optional

from flureturn.dates.helpers import add_days, day_difference, to_calendar_date
from flureturn.rules.types import ONSET_WAIT_DAYS, CalculationResult, StudentCategory, fever_wait_days

ONSET_REASON = f"発症した後{ONSET_WAIT_DAYS}日を経過"


def fever_reason(category: StudentCategory | str) -> str:
    return f"解熱した後{fever_wait_days(category)}日を経過"


def compute_return(onset: Any, fever: Any, category: StudentCategory | str) -> Optional[CalculationResult]:
    """Compute the return date, or ``None`` when no onset date is given.

    A fever date earlier than the onset date is computed through as-is.
    """
    onset_date = to_calendar_date(onset)
    if onset_date is None:
        return None

    category = StudentCategory.parse(category)
    fever_date = to_calendar_date(fever)

    last_wait_day = add_days(onset_date, ONSET_WAIT_DAYS)
    reason = ONSET_REASON

    if fever_date is not None:
        last_wait_from_fever = add_days(fever_date, fever_wait_days(category))
        # Ties keep the onset rule as the reason.
        if last_wait_from_fever > last_wait_day:
            last_wait_day = last_wait_from_fever
            reason = fever_reason(category)

    return_date = add_days(last_wait_day, 1)

    return CalculationResult(
        can_return_date=return_date,
        reason=reason,
        days_from_onset=day_difference(return_date, onset_date),
        days_from_fever=day_difference(return_date, fever_date) if fever_date is not None else 0,
        is_criterion_a_met=True,
        is_criterion_b_met=fever_date is not None,
    )
