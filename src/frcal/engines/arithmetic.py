"""
frcal.engines.arithmetic
------------------------
Closed-form day offset <-> FRC date by peeling 400/100/4/1-year blocks.

Both rule variants share the skeleton: inside every 4-year block the leap year
is the last one. Century blocks of 36524 days drop the leap day of their last
year (Gregorian exception); blocks of 36525 days keep it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from ..core.time import jdn_to_offset, offset_to_jdn
from ..core.types import COMMON_YEAR_DAYS, DAYS_PER_MONTH, EngineId, FrcDate, check_components

DAYS_PER_4_YEARS = 365 * 4 + 1


def romme_is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def historical_is_leap(year: int) -> bool:
    return year % 4 == 0


@dataclass(frozen=True)
class LeapCycle:
    name: str
    days_per_400: int
    days_per_100: int
    is_leap: Callable[[int], bool]

    def __post_init__(self) -> None:
        if self.days_per_100 not in (365 * 100 + 24, 365 * 100 + 25):
            raise ValueError("days_per_100 must be 36524 or 36525")
        if self.days_per_400 != 4 * self.days_per_100 + self.centurial_exception:
            raise ValueError("days_per_400 must be 146097 with 36524-day centuries, 146100 otherwise")

    @property
    def centurial_exception(self) -> bool:
        return self.days_per_100 == 365 * 100 + 24

    def leap_count(self, k: int) -> int:
        """Leap years among the first k years of the cycle."""
        n = k // 4
        if self.centurial_exception:
            n += -(k // 100) + k // 400
        return n


# Leap years follow the Gregorian 4/100/400 rule on the FRC year number.
ROMME = LeapCycle(
    name="romme",
    days_per_400=365 * 400 + 97,
    days_per_100=365 * 100 + 24,
    is_leap=romme_is_leap,
)

# Every fourth year is sextile, centuries included.
HISTORICAL = LeapCycle(
    name="historical",
    days_per_400=365 * 400 + 100,
    days_per_100=365 * 100 + 25,
    is_leap=historical_is_leap,
)


def split_days(days: int, cycle: LeapCycle) -> Tuple[int, int, int]:
    """Day offset since the epoch -> (year, month, day)."""
    n400 = days // cycle.days_per_400
    years = 400 * n400
    days -= cycle.days_per_400 * n400

    # the 4th century of a 146097-day block is one day longer
    n100 = days // cycle.days_per_100
    n100 -= n100 >> 2
    years += 100 * n100
    days -= cycle.days_per_100 * n100

    n4 = days // DAYS_PER_4_YEARS
    years += 4 * n4
    days -= DAYS_PER_4_YEARS * n4

    # day 1460 of a block is the leap day of its 4th year, not a 5th year
    n1 = days // COMMON_YEAR_DAYS
    n1 -= n1 >> 2
    years += n1
    days -= COMMON_YEAR_DAYS * n1

    return years + 1, days // DAYS_PER_MONTH + 1, days % DAYS_PER_MONTH + 1


def join_days(year: int, month: int, day: int, cycle: LeapCycle) -> int:
    """(year, month, day) -> day offset since the epoch. Inverse of split_days."""
    k = year - 1
    days = COMMON_YEAR_DAYS * k + cycle.leap_count(k)
    return days + (month - 1) * DAYS_PER_MONTH + day - 1


class ArithmeticEngine:
    def __init__(self, id: EngineId, cycle: LeapCycle):
        self.id = id
        self.cycle = cycle

    def info(self) -> Dict[str, Any]:
        c = self.cycle
        return {
            "id": self.id,
            "rule": c.name,
            "days_per_400": c.days_per_400,
            "days_per_100": c.days_per_100,
            "centurial_exception": c.centurial_exception,
        }

    def is_leap_year(self, year: int) -> bool:
        return self.cycle.is_leap(year)

    def days_in_year(self, year: int) -> int:
        return COMMON_YEAR_DAYS + self.is_leap_year(year)

    def offset_to_date(self, offset: int) -> FrcDate:
        y, m, d = split_days(offset, self.cycle)
        return FrcDate(engine=self.id, year=y, month=m, day=d)

    def date_to_offset(self, year: int, month: int, day: int) -> int:
        check_components(month, day, leap=self.is_leap_year(year))
        return join_days(year, month, day, self.cycle)

    def jdn_to_date(self, jdn: int) -> FrcDate:
        return self.offset_to_date(jdn_to_offset(jdn))

    def date_to_jdn(self, year: int, month: int, day: int) -> int:
        return offset_to_jdn(self.date_to_offset(year, month, day))
