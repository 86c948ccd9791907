"""
frcal.engines.leap_table
------------------------
Precomputed leap-year flags for table-driven rules (the autumn-equinox rule),
with a running count of leap days indexed by year offset.

The equinox rule has no closed form: a year is sextile when the equinox that
opens the *next* year falls 366 days after the one that opened it. The flags
are therefore supplied as ground truth (the shipped CSV, generated by
`frcal.reference.update_leap_table`) rather than computed here.
"""

from __future__ import annotations

import csv
import importlib.resources
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional, Sequence, Tuple, Union

from ..core.errors import OutOfRange
from ..core.types import COMMON_YEAR_DAYS, EPOCH_JDN

log = logging.getLogger(__name__)

EQUINOX_TABLE_RESOURCE = "reference/data/leap_years_equinox.csv"

LeapSource = Union[Sequence[bool], Callable[[int], bool]]


@dataclass(frozen=True)
class LeapYearTable:
    """
    flags[i]         : leap status of year start_year + i
    leaps_before[i]  : number of leap years in [start_year, start_year + i)
                       (len(flags) + 1 entries; the last one closes the span)
    epoch_jdn        : JDN of 1 Vendémiaire of start_year
    """
    start_year: int
    epoch_jdn: int
    flags: Tuple[bool, ...]
    leaps_before: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.flags:
            raise ValueError("LeapYearTable needs at least one year")
        if len(self.leaps_before) != len(self.flags) + 1:
            raise ValueError("leaps_before must have len(flags) + 1 entries")
        if self.leaps_before[0] != 0:
            raise ValueError("leaps_before[0] must be 0")

    @classmethod
    def build(
        cls,
        leap_source: LeapSource,
        *,
        start_year: int = 1,
        max_years: Optional[int] = None,
        epoch_jdn: int = EPOCH_JDN,
    ) -> "LeapYearTable":
        """
        Build a table from a sequence of flags (precomputed ground truth) or
        from a predicate year -> bool. A predicate needs max_years; a sequence
        is truncated to max_years when given.
        """
        if max_years is not None and max_years <= 0:
            raise ValueError(f"max_years must be positive, got {max_years}")

        if callable(leap_source):
            if max_years is None:
                raise ValueError("max_years is required when leap_source is a predicate")
            flags = tuple(bool(leap_source(start_year + i)) for i in range(max_years))
        else:
            flags = tuple(bool(f) for f in leap_source)
            if max_years is not None:
                flags = flags[:max_years]

        acc = 0
        leaps_before = [0]
        for leap in flags:
            acc += leap
            leaps_before.append(acc)

        # f(y) = epoch_jdn + 365*y + leaps_before[y] must be non-decreasing
        assert all(a <= b for a, b in zip(leaps_before, leaps_before[1:]))

        return cls(
            start_year=start_year,
            epoch_jdn=epoch_jdn,
            flags=flags,
            leaps_before=tuple(leaps_before),
        )

    @classmethod
    def load_equinox(cls, max_years: Optional[int] = None) -> "LeapYearTable":
        """The shipped equinox-rule table (years 1..3000), optionally truncated."""
        table = _load_equinox_table()
        if max_years is None:
            return table
        return cls.build(table.flags, start_year=table.start_year,
                         max_years=max_years, epoch_jdn=table.epoch_jdn)

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self.flags)

    @property
    def end_year(self) -> int:
        """First year past the table (exclusive bound)."""
        return self.start_year + len(self.flags)

    @property
    def first_jdn(self) -> int:
        return self.epoch_jdn

    @property
    def end_jdn(self) -> int:
        """First JDN past the table (exclusive bound)."""
        return self.new_year_jdn(self.end_year)

    def index(self, year: int) -> int:
        i = year - self.start_year
        if not (0 <= i < len(self.flags)):
            raise OutOfRange(
                f"Year {year} outside the leap table span [{self.start_year}, {self.end_year})"
            )
        return i

    def is_leap(self, year: int) -> bool:
        return self.flags[self.index(year)]

    def leaps_before_year(self, year: int) -> int:
        if year == self.end_year:
            return self.leaps_before[-1]
        return self.leaps_before[self.index(year)]

    def new_year_jdn(self, year: int) -> int:
        """JDN of 1 Vendémiaire of `year`; end_year itself is accepted."""
        i = year - self.start_year
        return self.epoch_jdn + COMMON_YEAR_DAYS * i + self.leaps_before_year(year)


@lru_cache(maxsize=1)
def _load_equinox_table() -> LeapYearTable:
    path = importlib.resources.files("frcal").joinpath(EQUINOX_TABLE_RESOURCE)
    with path.open("r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    table = table_from_rows(rows)
    log.debug("Loaded equinox leap table: years %d..%d", table.start_year, table.end_year - 1)
    return table


def table_from_rows(rows: Sequence[dict]) -> LeapYearTable:
    """
    Build a table from CSV rows (year, new_year_jdn, leap) and check that the
    listed new-year JDNs agree with the running leap count.
    """
    if not rows:
        raise ValueError("Leap table CSV is empty")
    try:
        years = [int(r["year"]) for r in rows]
        jdns = [int(r["new_year_jdn"]) for r in rows]
        flags = [r["leap"].strip() == "1" for r in rows]
    except (KeyError, ValueError, AttributeError) as e:
        raise ValueError(f"Malformed leap table CSV: {e}") from e

    start = years[0]
    if years != list(range(start, start + len(years))):
        raise ValueError("Leap table CSV years are not contiguous")

    table = LeapYearTable.build(flags, start_year=start, epoch_jdn=jdns[0])
    for year, jdn in zip(years, jdns):
        if table.new_year_jdn(year) != jdn:
            raise ValueError(
                f"Leap table CSV inconsistent at year {year}: "
                f"listed {jdn}, running count gives {table.new_year_jdn(year)}"
            )
    return table
