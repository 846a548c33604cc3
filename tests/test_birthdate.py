from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from staffgen.sampling.birthdate import (
    age_at,
    birth_window,
    format_iso,
    parse_iso,
    sample_birthdate,
    subtract_years,
    to_epoch_ms,
)

UTC = timezone.utc
TODAY = datetime(2025, 6, 15, 10, 30, 0, tzinfo=UTC)


class FixedRandom:
    """Random source returning a constant from ``random()``."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def test_subtract_years_preserves_month_day_time() -> None:
    assert subtract_years(TODAY, 30) == datetime(1995, 6, 15, 10, 30, tzinfo=UTC)


def test_subtract_years_leap_day_rolls_to_march() -> None:
    leap = datetime(2024, 2, 29, 8, 0, tzinfo=UTC)
    assert subtract_years(leap, 1) == datetime(2023, 3, 1, 8, 0, tzinfo=UTC)
    assert subtract_years(leap, 4) == datetime(2020, 2, 29, 8, 0, tzinfo=UTC)


def test_birth_window() -> None:
    earliest, latest = birth_window(TODAY, 20, 30)
    assert earliest == datetime(1995, 6, 15, 10, 30, tzinfo=UTC)
    assert latest == datetime(2005, 6, 15, 10, 30, tzinfo=UTC)


def test_naive_today_treated_as_utc() -> None:
    naive = datetime(2025, 6, 15, 10, 30)
    assert birth_window(naive, 20, 30) == birth_window(TODAY, 20, 30)


def test_format_iso() -> None:
    moment = datetime(1994, 3, 7, 11, 22, 33, 456789, tzinfo=UTC)
    assert format_iso(moment) == "1994-03-07T11:22:33.456Z"


def test_format_iso_converts_offsets() -> None:
    prague = timezone(timedelta(hours=2))
    moment = datetime(2000, 1, 1, 1, 0, tzinfo=prague)
    assert format_iso(moment) == "1999-12-31T23:00:00.000Z"


def test_parse_iso_inverse_of_format() -> None:
    moment = datetime(1961, 12, 1, 0, 0, 0, 123000, tzinfo=UTC)
    assert parse_iso(format_iso(moment)) == moment


def test_sample_excludes_window_start() -> None:
    birth = sample_birthdate(20, 30, TODAY, FixedRandom(0.0))
    assert birth == "1995-06-15T10:30:00.001Z"
    assert age_at(parse_iso(birth), TODAY) == 29


def test_sample_midpoint() -> None:
    earliest, latest = birth_window(TODAY, 20, 30)
    span = to_epoch_ms(latest) - to_epoch_ms(earliest)
    expected_ms = to_epoch_ms(earliest) + 1 + (span - 1) // 2
    birth = parse_iso(sample_birthdate(20, 30, TODAY, FixedRandom(0.5)))
    assert to_epoch_ms(birth) == expected_ms


def test_sample_near_one_stays_below_latest() -> None:
    birth = parse_iso(sample_birthdate(20, 30, TODAY, FixedRandom(0.9999999999)))
    assert birth < datetime(2005, 6, 15, 10, 30, tzinfo=UTC)


def test_pre_epoch_dates() -> None:
    birth = sample_birthdate(90, 99, TODAY, FixedRandom(0.25))
    assert birth.startswith("19")
    assert age_at(parse_iso(birth), TODAY) in range(90, 99)


@pytest.mark.parametrize("lo,hi", [(14, 15), (20, 30), (64, 99)])
def test_sampled_ages_in_half_open_range(lo: int, hi: int) -> None:
    rng = random.Random(lo * 100 + hi)
    for _ in range(500):
        birth = parse_iso(sample_birthdate(lo, hi, TODAY, rng))
        assert lo <= age_at(birth, TODAY) < hi


def test_age_at() -> None:
    birth = datetime(2000, 6, 15, 10, 30, tzinfo=UTC)
    assert age_at(birth, TODAY) == 25
    assert age_at(birth, TODAY - timedelta(seconds=1)) == 24
    leapling = datetime(2000, 2, 29, tzinfo=UTC)
    assert age_at(leapling, datetime(2023, 2, 28, tzinfo=UTC)) == 22
    assert age_at(leapling, datetime(2023, 3, 1, tzinfo=UTC)) == 23
