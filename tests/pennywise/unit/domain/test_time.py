"""Unit tests for the UTC time helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from pennywise.domain.shared.time import (
    end_of_day_utc_exclusive,
    ensure_tz_aware,
    last_day_of_month,
    month_key,
    months_before,
    next_month,
    parse_month_key,
    start_of_day_utc,
    to_utc,
)


def test_ensure_tz_aware_marks_naive_as_utc():
    assert ensure_tz_aware(datetime(2024, 1, 1)).tzinfo == timezone.utc


def test_to_utc_converts_offsets():
    minus_three = timezone(timedelta(hours=-3))

    result = to_utc(datetime(2024, 1, 31, 22, 0, tzinfo=minus_three))

    assert result == datetime(2024, 2, 1, 1, 0, tzinfo=timezone.utc)


def test_start_of_day_utc():
    assert start_of_day_utc(date(2024, 5, 6)) == datetime(
        2024, 5, 6, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 1, 15), date(2024, 2, 1)),
        (date(2024, 12, 31), date(2025, 1, 1)),
    ],
)
def test_next_month(day, expected):
    assert next_month(day) == expected


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 2, 10), date(2024, 2, 29)),
        (date(2023, 2, 10), date(2023, 2, 28)),
        (date(2024, 12, 1), date(2024, 12, 31)),
        (date(9999, 12, 1), date(9999, 12, 31)),
    ],
)
def test_last_day_of_month(day, expected):
    assert last_day_of_month(day) == expected


def test_end_of_day_utc_exclusive_is_next_midnight():
    assert end_of_day_utc_exclusive(date(2024, 12, 31)) == datetime(
        2025, 1, 1, tzinfo=timezone.utc
    )


def test_end_of_day_utc_exclusive_has_no_bound_after_date_max():
    assert end_of_day_utc_exclusive(date.max) is None


@pytest.mark.parametrize(
    ("day", "months", "expected"),
    [
        (date(2024, 6, 15), 6, date(2023, 12, 15)),
        (date(2024, 3, 31), 1, date(2024, 2, 29)),
        (date(2024, 1, 10), 12, date(2023, 1, 10)),
        (date(2024, 5, 31), 3, date(2024, 2, 29)),
    ],
)
def test_months_before_clamps_to_month_end(day, months, expected):
    assert months_before(day, months) == expected


def test_month_key_truncates_in_utc():
    plus_two = timezone(timedelta(hours=2))

    assert month_key(datetime(2024, 3, 1, 1, 0, tzinfo=plus_two)) == "2024-02"
    assert month_key(date(2024, 3, 1)) == "2024-03"


def test_parse_month_key():
    assert parse_month_key("2024-07") == date(2024, 7, 1)
