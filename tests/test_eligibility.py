"""Tests for the return-date rule."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from flureturn.rules.eligibility import ONSET_REASON, compute_return, fever_reason
from flureturn.rules.types import StudentCategory, fever_wait_days

ONSET = date(2024, 1, 10)


def test_no_onset_gives_no_result() -> None:
    assert compute_return(None, "2024-01-12", StudentCategory.SCHOOL) is None
    assert compute_return("", "", StudentCategory.PRESCHOOL) is None


@pytest.mark.parametrize("category", list(StudentCategory))
def test_onset_only_returns_on_day_six(category: StudentCategory) -> None:
    result = compute_return(ONSET, None, category)

    assert result.can_return_date == date(2024, 1, 16)
    assert result.days_from_onset == 6
    assert result.days_from_fever == 0
    assert result.reason == ONSET_REASON
    assert result.is_criterion_a_met is True
    assert result.is_criterion_b_met is False


def test_onset_rule_binds_when_fever_resolves_early() -> None:
    result = compute_return("2024-01-10", "2024-01-12", StudentCategory.SCHOOL)

    assert result.can_return_date == date(2024, 1, 16)
    assert result.reason == ONSET_REASON
    assert result.days_from_fever == 4
    assert result.is_criterion_b_met is True


def test_fever_rule_binds_for_school() -> None:
    result = compute_return("2024-01-10", "2024-01-15", "school")

    assert result.can_return_date == date(2024, 1, 18)
    assert result.reason == fever_reason(StudentCategory.SCHOOL) == "解熱した後2日を経過"
    assert result.days_from_fever == 3
    assert result.days_from_onset == 8


def test_fever_rule_binds_for_preschool() -> None:
    result = compute_return("2024-01-10", "2024-01-15", StudentCategory.PRESCHOOL)

    assert result.can_return_date == date(2024, 1, 19)
    assert result.reason == "解熱した後3日を経過"
    assert result.days_from_fever == 4


def test_tie_keeps_onset_reason() -> None:
    # Fever + 2 == onset + 5 on 2024-01-15.
    result = compute_return("2024-01-10", "2024-01-13", StudentCategory.SCHOOL)

    assert result.can_return_date == date(2024, 1, 16)
    assert result.reason == ONSET_REASON


@pytest.mark.parametrize("category", list(StudentCategory))
@pytest.mark.parametrize("fever_offset", range(-3, 9))
def test_return_date_is_later_of_both_rules(category: StudentCategory, fever_offset: int) -> None:
    fever = ONSET + timedelta(days=fever_offset)
    wait = fever_wait_days(category)

    result = compute_return(ONSET, fever, category)

    if fever + timedelta(days=wait) >= ONSET + timedelta(days=5):
        assert result.can_return_date == fever + timedelta(days=wait + 1)
    else:
        assert result.can_return_date == ONSET + timedelta(days=6)
    assert result.days_from_onset >= 6


def test_fever_before_onset_is_computed_through() -> None:
    result = compute_return("2024-01-10", "2024-01-05", StudentCategory.SCHOOL)

    assert result.can_return_date == date(2024, 1, 16)
    assert result.days_from_fever == 11


def test_unknown_category_is_rejected() -> None:
    with pytest.raises(ValueError):
        compute_return("2024-01-10", None, "university")
