"""Display strings and tabular views for the return-date timeline."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from flureturn.dates.helpers import format_date_jp
from flureturn.rules.types import ONSET_WAIT_DAYS, DayStatus, StudentCategory, fever_wait_days

MARKER_ONSET = "発症日"
MARKER_FEVER = "解熱日"
MARKER_RETURN = "登校可能日"

TIMELINE_COLUMNS = [
    "date",
    "label",
    "caption",
    "day_from_onset",
    "day_from_fever",
    "status",
    "onset_progress",
    "fever_progress",
    "markers",
]


def result_headline(fever_present: bool) -> str:
    return "最短登校可能日" if fever_present else "解熱日が未定の場合の目安"


def onset_progress_label(day: DayStatus) -> str:
    if day.day_num_from_onset > ONSET_WAIT_DAYS:
        return f"経過({ONSET_WAIT_DAYS}日超)"
    return f"経過中({day.day_num_from_onset}/{ONSET_WAIT_DAYS})"


def fever_progress_label(day: DayStatus, category: StudentCategory | str) -> Optional[str]:
    if day.day_num_from_fever is None:
        return None
    limit = fever_wait_days(category)
    if day.day_num_from_fever > limit:
        return f"経過({limit}日超)"
    shown = day.day_num_from_fever if day.day_num_from_fever >= 0 else "-"
    return f"経過中({shown}/{limit})"


def day_caption(day: DayStatus) -> str:
    if day.is_return_date:
        return "登校可能"
    return f"発症{day.day_num_from_onset}日目"


def markers(day: DayStatus) -> List[str]:
    found = []
    if day.is_onset:
        found.append(MARKER_ONSET)
    if day.is_fever_resolved:
        found.append(MARKER_FEVER)
    if day.is_return_date:
        found.append(MARKER_RETURN)
    return found


def timeline_frame(days: Sequence[DayStatus], category: StudentCategory | str) -> pd.DataFrame:
    """Tabulate a timeline for display or export."""
    records = []
    for day in days:
        records.append(
            {
                "date": day.date.isoformat(),
                "label": format_date_jp(day.date),
                "caption": day_caption(day),
                "day_from_onset": day.day_num_from_onset,
                "day_from_fever": day.day_num_from_fever,
                "status": day.status,
                "onset_progress": onset_progress_label(day),
                "fever_progress": fever_progress_label(day, category) or "",
                "markers": ", ".join(markers(day)),
            }
        )
    return pd.DataFrame(records, columns=TIMELINE_COLUMNS)
