"""Tests for the per-day timeline and its display helpers."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from flureturn.dates.helpers import day_difference
from flureturn.rules.eligibility import compute_return
from flureturn.rules.labels import (
    TIMELINE_COLUMNS,
    day_caption,
    fever_progress_label,
    markers,
    onset_progress_label,
    result_headline,
    timeline_frame,
)
from flureturn.rules.timeline import build_timeline
from flureturn.rules.types import StudentCategory

ONSET = date(2024, 1, 10)


def _timeline(fever: date | None, category: StudentCategory):
    result = compute_return(ONSET, fever, category)
    return result, build_timeline(ONSET, fever, result.can_return_date, category)


def test_onset_only_timeline() -> None:
    result, days = _timeline(None, StudentCategory.SCHOOL)

    assert len(days) == 7
    assert days[0].is_onset and days[0].date == ONSET
    assert days[-1].is_return_date and days[-1].date == result.can_return_date
    assert all(day.day_num_from_fever is None for day in days)
    assert not any(day.is_fever_resolved for day in days)
    assert [day.status for day in days] == ["wait"] * 6 + ["ok"]


@pytest.mark.parametrize("category", list(StudentCategory))
@pytest.mark.parametrize("fever_offset", [-2, 0, 2, 3, 5, 7])
def test_timeline_agrees_with_return_date(category: StudentCategory, fever_offset: int) -> None:
    fever = ONSET + timedelta(days=fever_offset)
    result, days = _timeline(fever, category)

    assert len(days) == day_difference(result.can_return_date, ONSET) + 1
    assert sum(day.day_num_from_onset == 0 for day in days) == 1
    assert sum(day.is_onset for day in days) == 1
    assert sum(day.is_return_date for day in days) == 1
    assert days[0].is_onset
    assert days[-1].is_return_date
    assert days[-1].status == "ok"
    assert days[-2].status == "wait"
    assert all(day.status == "wait" for day in days[:-1])

    fever_days = [day for day in days if day.day_num_from_fever == 0]
    if 0 <= fever_offset < len(days):
        assert len(fever_days) == 1
        assert fever_days[0].is_fever_resolved
        assert fever_days[0].date == fever


def test_fever_offsets_are_signed() -> None:
    _, days = _timeline(ONSET + timedelta(days=3), StudentCategory.PRESCHOOL)

    assert days[0].day_num_from_fever == -3
    assert days[3].day_num_from_fever == 0
    assert days[-1].day_num_from_fever == 4


def test_empty_onset_gives_empty_timeline() -> None:
    assert build_timeline(None, None, ONSET, StudentCategory.SCHOOL) == []


def test_progress_labels() -> None:
    _, days = _timeline(ONSET + timedelta(days=1), StudentCategory.SCHOOL)
    onset_day, last_day = days[0], days[-1]

    assert onset_progress_label(onset_day) == "経過中(0/5)"
    assert onset_progress_label(last_day) == "経過(5日超)"
    assert fever_progress_label(onset_day, StudentCategory.SCHOOL) == "経過中(-/2)"
    assert fever_progress_label(days[2], StudentCategory.SCHOOL) == "経過中(1/2)"
    assert fever_progress_label(last_day, StudentCategory.SCHOOL) == "経過(2日超)"


def test_progress_label_absent_without_fever() -> None:
    _, days = _timeline(None, StudentCategory.PRESCHOOL)
    assert fever_progress_label(days[0], StudentCategory.PRESCHOOL) is None


def test_captions_and_markers() -> None:
    _, days = _timeline(ONSET, StudentCategory.SCHOOL)

    assert day_caption(days[0]) == "発症0日目"
    assert day_caption(days[-1]) == "登校可能"
    assert markers(days[0]) == ["発症日", "解熱日"]
    assert markers(days[-1]) == ["登校可能日"]
    assert markers(days[2]) == []


def test_result_headline() -> None:
    assert result_headline(True) == "最短登校可能日"
    assert result_headline(False) == "解熱日が未定の場合の目安"


def test_timeline_frame_columns() -> None:
    _, days = _timeline(ONSET + timedelta(days=5), StudentCategory.PRESCHOOL)
    frame = timeline_frame(days, StudentCategory.PRESCHOOL)

    assert list(frame.columns) == TIMELINE_COLUMNS
    assert frame.shape[0] == len(days)
    assert frame.iloc[0]["label"] == "1月10日(水)"
    assert frame.iloc[-1]["status"] == "ok"
    assert frame.iloc[-1]["markers"] == "登校可能日"
