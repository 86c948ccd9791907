from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

from .errors import ClockUnavailable, InvalidGregorianSource, OutOfRange
from .types import EPOCH_JDN

GregorianLike = Union[date, Tuple[int, int, int]]

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def check_gregorian(year: int, month: int, day: int) -> None:
    """Reject month/day combinations that do not exist in the proleptic Gregorian calendar."""
    if not (1 <= month <= 12):
        raise InvalidGregorianSource(f"Gregorian month must be in 1..12, got {month}")
    last = _DAYS_IN_MONTH[month - 1]
    if month == 2 and is_gregorian_leap(year):
        last = 29
    if not (1 <= day <= last):
        raise InvalidGregorianSource(
            f"Gregorian day must be in 1..{last} for {year:04d}-{month:02d}, got {day}"
        )


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) -> JDN (Fliegel-Van Flandern). Valid for any signed year."""
    check_gregorian(year, month, day)
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: GregorianLike) -> int:
    """Convert a `date` or a (year, month, day) tuple to a JDN."""
    if isinstance(d, date):
        return gregorian_to_jdn(d.year, d.month, d.day)
    try:
        y, m, day = d
    except (TypeError, ValueError) as e:
        raise InvalidGregorianSource(f"Expected a date or (year, month, day), got {d!r}") from e
    return gregorian_to_jdn(int(y), int(m), int(day))


def from_jdn(jdn: int) -> date:
    """JDN -> `datetime.date` (years 1..9999 only, as `date` itself)."""
    y, m, d = jdn_to_gregorian(jdn)
    try:
        return date(y, m, d)
    except ValueError as e:
        raise OutOfRange(f"JDN {jdn} ({y}-{m}-{d}) is outside datetime.date's range") from e


def offset_to_jdn(offset: int) -> int:
    return offset + EPOCH_JDN


def jdn_to_offset(jdn: int) -> int:
    return jdn - EPOCH_JDN


def today_jdn(*, local: bool = False, now: Optional[datetime] = None) -> int:
    """
    JDN of the current civil date, in UTC or in the host's local time zone.
    `now` overrides the clock (must be timezone-aware).
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    if local:
        try:
            now = now.astimezone()
        except (OSError, OverflowError, ValueError) as e:
            raise ClockUnavailable("Cannot resolve the local time zone") from e
    else:
        now = now.astimezone(timezone.utc)

    d = now.date()
    return gregorian_to_jdn(d.year, d.month, d.day)
