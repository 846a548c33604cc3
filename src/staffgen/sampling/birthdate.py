"""Birthdate sampling within an age range.

The window of valid birth instants is ``[today - max years, today - min years]``
using calendar year subtraction: month, day and time of day are kept, and
29 February rolls over to 1 March when the target year is not a leap year.
A timestamp is drawn uniformly over the milliseconds strictly after the start
of that window and before its end, so the age at ``today`` is at least ``min``
and below ``max``.  It is rendered as an ISO-8601 UTC string such as
``1994-03-07T11:22:33.456Z``.

Naive datetimes are interpreted as UTC.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from .rng import RandomSource

__all__ = [
    "EPOCH",
    "as_utc",
    "subtract_years",
    "to_epoch_ms",
    "from_epoch_ms",
    "format_iso",
    "parse_iso",
    "age_at",
    "birth_window",
    "sample_birthdate",
]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as an aware UTC datetime."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def subtract_years(moment: datetime, years: int) -> datetime:
    """Move ``moment`` back by ``years`` calendar years."""

    year = moment.year - years
    try:
        return moment.replace(year=year)
    except ValueError:
        # 29 February in a common year
        return moment.replace(year=year, month=3, day=1)


def to_epoch_ms(moment: datetime) -> int:
    return (as_utc(moment) - EPOCH) // _ONE_MS


def from_epoch_ms(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def format_iso(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC."""

    moment = as_utc(moment)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def parse_iso(text: str) -> datetime:
    """Parse a string produced by :func:`format_iso` back into a datetime."""

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))


def age_at(birth: datetime, reference: datetime) -> int:
    """Return the number of completed years between ``birth`` and ``reference``."""

    birth = as_utc(birth)
    reference = as_utc(reference)
    years = reference.year - birth.year
    if subtract_years(reference, years) < birth:
        years -= 1
    return years


def birth_window(today: datetime, min_age: int, max_age: int) -> tuple[datetime, datetime]:
    """Return ``(earliest, latest)`` birth instants for the age range."""

    today = as_utc(today)
    return subtract_years(today, max_age), subtract_years(today, min_age)


def sample_birthdate(
    min_age: int,
    max_age: int,
    today: datetime,
    rng: RandomSource,
) -> str:
    """Draw a birthdate whose age at ``today`` lies in ``[min_age, max_age)``."""

    earliest, latest = birth_window(today, min_age, max_age)
    start = to_epoch_ms(earliest)
    span = to_epoch_ms(latest) - start
    birth_ms = start + 1 + math.floor(rng.random() * (span - 1))
    return format_iso(from_epoch_ms(birth_ms))
