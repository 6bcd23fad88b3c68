"""Tests for week boundaries and air date adjustment."""

import random
from datetime import date, timedelta

import pytest

from tvdigest.services.schedule import adjust_air_date, compute_week, saturating_add_days

SUNDAY = 7
SATURDAY = 6


def _sample_dates() -> list[date]:
    """Every day of 2021-2023, both ends of the date range, and random days in between."""
    days = [date(2021, 1, 1) + timedelta(days=n) for n in range(365 * 3)]
    days += [date.min + timedelta(days=n) for n in range(15)]
    days += [date.max - timedelta(days=n) for n in range(15)]
    rng = random.Random(20220501)
    days += [
        date.fromordinal(rng.randint(date.min.toordinal(), date.max.toordinal()))
        for _ in range(300)
    ]
    return days


SAMPLE_DATES = _sample_dates()


def test_week_starts_on_sunday_date():
    """A Sunday starts its own week."""
    day = date(2022, 5, 1)

    window = compute_week(day)

    assert window.start == day
    assert window.end == date(2022, 5, 7)


def test_week_ends_on_saturday_date():
    day = date(2022, 5, 7)

    assert compute_week(day).end == day


def test_midweek_date():
    window = compute_week(date(2022, 5, 4))

    assert (window.start, window.end) == (date(2022, 5, 1), date(2022, 5, 7))


def test_week_spanning_new_year():
    window = compute_week(date(2022, 12, 31))

    assert (window.start, window.end) == (date(2022, 12, 25), date(2022, 12, 31))
    assert compute_week(date(2023, 1, 1)).start == date(2023, 1, 1)


def test_week_clamped_at_min_date():
    """date.min is a Monday, so its Sunday falls off the range."""
    window = compute_week(date.min)

    assert window.start == date.min
    assert window.end == date(1, 1, 6)
    assert window.is_clamped


def test_week_clamped_at_max_date():
    """date.max is a Friday, so its Saturday falls off the range."""
    window = compute_week(date.max)

    assert window.start == date(9999, 12, 26)
    assert window.end == date.max
    assert window.is_clamped


@pytest.mark.parametrize("day", SAMPLE_DATES, ids=str)
def test_week_properties(day):
    """The window contains the date, runs Sunday to Saturday and spans seven days unless clamped."""
    window = compute_week(day)

    assert window.start <= day <= window.end
    assert window.start <= window.end
    assert window.start == date.min or window.start.isoweekday() == SUNDAY
    assert window.end == date.max or window.end.isoweekday() == SATURDAY
    if not window.is_clamped:
        assert window.end - window.start == timedelta(days=6)
        assert len(list(window.days())) == 7


def test_saturating_add_days():
    assert saturating_add_days(date(2022, 5, 1), 1) == date(2022, 5, 2)
    assert saturating_add_days(date.max, 1) == date.max
    assert saturating_add_days(date.min, -1) == date.min


def test_adjust_air_date_streaming(make_series, make_episode):
    """Series on a streaming network keep the reported date."""
    day = date(2022, 5, 1)
    series = make_series("X", networks=(123,))

    assert adjust_air_date(series, make_episode(day, 1, 2), [123]) == day


def test_adjust_air_date_non_streaming(make_series, make_episode):
    """Series on no streaming network move one day later."""
    day = date(2022, 5, 1)
    series = make_series("X", networks=(123,))

    assert adjust_air_date(series, make_episode(day, 1, 2), [456]) == date(2022, 5, 2)


def test_adjust_air_date_any_network_matches(make_series, make_episode):
    day = date(2022, 5, 1)
    series = make_series("X", networks=(456, 789))

    assert adjust_air_date(series, make_episode(day), {789}) == day


def test_adjust_air_date_without_networks(make_series, make_episode):
    day = date(2022, 5, 1)
    series = make_series("X", networks=())

    assert adjust_air_date(series, make_episode(day), [123]) == date(2022, 5, 2)


def test_adjust_air_date_saturates(make_series, make_episode):
    series = make_series("X", networks=(456,))

    assert adjust_air_date(series, make_episode(date.max), [123]) == date.max
