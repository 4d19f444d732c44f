"""Day-by-day status timeline from onset through the return date."""

from __future__ import annotations

from typing import Any, List

from flureturn.dates.helpers import date_range, day_difference, to_calendar_date
from flureturn.rules.types import ONSET_WAIT_DAYS, DayStatus, StudentCategory, fever_wait_days


def day_status(day_from_onset: int, day_from_fever: int | None, category: StudentCategory | str) -> str:
    """Return "ok" once every applicable waiting period has strictly passed."""
    onset_done = day_from_onset > ONSET_WAIT_DAYS
    if day_from_fever is None:
        # Onset-only view while the fever date is unknown.
        return "ok" if onset_done else "wait"
    fever_done = day_from_fever > fever_wait_days(category)
    return "ok" if onset_done and fever_done else "wait"


def build_timeline(onset: Any, fever: Any, return_date: Any, category: StudentCategory | str) -> List[DayStatus]:
    """One DayStatus per calendar day from onset to return date inclusive."""
    onset_date = to_calendar_date(onset)
    if onset_date is None:
        return []
    fever_date = to_calendar_date(fever)
    category = StudentCategory.parse(category)

    days: List[DayStatus] = []
    for current in date_range(onset_date, return_date):
        from_onset = day_difference(current, onset_date)
        from_fever = day_difference(current, fever_date) if fever_date is not None else None
        days.append(
            DayStatus(
                date=current,
                day_num_from_onset=from_onset,
                day_num_from_fever=from_fever,
                status=day_status(from_onset, from_fever, category),
                is_onset=from_onset == 0,
                is_fever_resolved=from_fever == 0,
                is_return_date=day_difference(current, return_date) == 0,
            )
        )
    return days
