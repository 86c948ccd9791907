"""
Display names for FRC dates: months, décade days, complementary-day
festivals, and Roman-numeral years.
"""

from __future__ import annotations

from typing import Optional

from .core.errors import InvalidCalendarComponents
from .core.types import COMPLEMENTARY_MONTH, FrcDate

MONTHS = (
    "Vendémiaire", "Brumaire", "Frimaire",
    "Nivôse", "Pluviôse", "Ventôse",
    "Germinal", "Floréal", "Prairial",
    "Messidor", "Thermidor", "Fructidor",
    "Complémentaires",
)

DECADE_DAYS = (
    "Primidi", "Duodi", "Tridi", "Quartidi", "Quintidi",
    "Sextidi", "Septidi", "Octidi", "Nonidi", "Décadi",
)

SANSCULOTTIDES = (
    "La Fête de la Vertu", "La Fête du Génie", "La Fête du Travail",
    "La Fête de l'Opinion", "La Fête des Récompenses", "La Fête de la Révolution",
)

MAX_NUMERAL_VALUE = 3999

_NUMERALS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def month_name(month: int) -> str:
    if not (1 <= month <= COMPLEMENTARY_MONTH):
        raise InvalidCalendarComponents(f"month must be in 1..13, got {month}")
    return MONTHS[month - 1]


def weekday_name(month: int, day: int) -> str:
    """Name of the décade day, or of the festival for a complementary day."""
    if month == COMPLEMENTARY_MONTH:
        if not (1 <= day <= len(SANSCULOTTIDES)):
            raise InvalidCalendarComponents(f"complementary day must be in 1..6, got {day}")
        return SANSCULOTTIDES[day - 1]
    month_name(month)
    if not (1 <= day <= 30):
        raise InvalidCalendarComponents(f"day must be in 1..30, got {day}")
    return DECADE_DAYS[(day - 1) % 10]


def to_numeral(value: int) -> Optional[str]:
    """Roman numeral for 1..3999, None otherwise."""
    if not (1 <= value <= MAX_NUMERAL_VALUE):
        return None
    out = []
    for number, numeral in _NUMERALS:
        count, value = divmod(value, number)
        out.append(numeral * count)
    return "".join(out)


def format_year(year: int) -> str:
    numeral = to_numeral(year)
    return numeral if numeral is not None else str(year)


def format_date(d: FrcDate) -> str:
    """'<day> <Month> An <YEAR>', e.g. '18 Brumaire An VIII'."""
    return f"{d.day} {month_name(d.month)} An {format_year(d.year)}"
