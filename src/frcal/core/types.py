from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Literal, Tuple

from .errors import InvalidCalendarComponents

# FRC 1 Vendémiaire An I == Gregorian 1792-09-22
EPOCH_JDN = 2375840

DAYS_PER_MONTH = 30
ORDINARY_MONTHS = 12
COMPLEMENTARY_MONTH = 13
COMMON_YEAR_DAYS = 365
MAX_COMPLEMENTARY_DAYS = 6


@dataclass(frozen=True)
class EngineId:
    family: Literal["table", "arithmetic"]
    name: str
    version: str


@dataclass(frozen=True)
class FrcDate:
    engine: EngineId
    year: int
    month: int  # 1..13, 13 = jours complémentaires
    day: int

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    @property
    def is_complementary(self) -> bool:
        return self.month == COMPLEMENTARY_MONTH

    @property
    def day_of_year(self) -> int:
        return day_of_year(self.month, self.day)


@dataclass(frozen=True)
class EngineSpec:
    """Pure data payload naming an engine and the parameters it is built from."""
    id: EngineId
    payload: Any  # LeapCycle | TableSource
    meta: dict


def day_of_year(month: int, day: int) -> int:
    """1-based ordinal of (month, day) within the FRC year."""
    if not (1 <= month <= COMPLEMENTARY_MONTH):
        raise InvalidCalendarComponents(f"month must be in 1..13, got {month}")
    last = MAX_COMPLEMENTARY_DAYS if month == COMPLEMENTARY_MONTH else DAYS_PER_MONTH
    if not (1 <= day <= last):
        raise InvalidCalendarComponents(f"day must be in 1..{last} for month {month}, got {day}")
    return (month - 1) * DAYS_PER_MONTH + day


def check_components(month: int, day: int, *, leap: bool) -> None:
    """
    Validate (month, day) for a year whose leap status is already known.
    Month 13 has 5 days, or 6 in a leap year.
    """
    if not (1 <= month <= COMPLEMENTARY_MONTH):
        raise InvalidCalendarComponents(f"month must be in 1..13, got {month}")
    if month == COMPLEMENTARY_MONTH:
        last = MAX_COMPLEMENTARY_DAYS if leap else MAX_COMPLEMENTARY_DAYS - 1
    else:
        last = DAYS_PER_MONTH
    if not (1 <= day <= last):
        raise InvalidCalendarComponents(
            f"day must be in 1..{last} for month {month}, got {day}"
        )
