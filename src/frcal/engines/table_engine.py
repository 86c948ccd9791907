"""
frcal.engines.table_engine
--------------------------
Julian Day Number <-> FRC date through a precomputed LeapYearTable
(autumn-equinox rule).
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.errors import OutOfRange
from ..core.time import jdn_to_offset, offset_to_jdn
from ..core.types import COMMON_YEAR_DAYS, DAYS_PER_MONTH, EngineId, FrcDate, check_components
from .leap_table import LeapYearTable


class TableEngine:
    """
    Conversions are pure; the only state is the read-only table passed in.
    """
    def __init__(self, id: EngineId, table: LeapYearTable):
        self.id = id
        self.table = table

    def info(self) -> Dict[str, Any]:
        t = self.table
        return {
            "id": self.id,
            "rule": "equinox table",
            "start_year": t.start_year,
            "end_year": t.end_year - 1,
            "first_jdn": t.first_jdn,
            "end_jdn": t.end_jdn - 1,
        }

    # ---------------------------------------------------------
    # Core table arithmetic
    # ---------------------------------------------------------

    def _f(self, y: int) -> int:
        t = self.table
        return t.epoch_jdn + COMMON_YEAR_DAYS * y + t.leaps_before[y]

    def to_calendar(self, jdn: int) -> Tuple[int, int, int]:
        t = self.table
        if not (t.first_jdn <= jdn < t.end_jdn):
            raise OutOfRange(f"JDN {jdn} outside the leap table span [{t.first_jdn}, {t.end_jdn})")

        # f(y) is non-decreasing; keep f(low) <= jdn < f(high)
        low, high = 0, len(t)
        while low + 1 < high:
            width = high - low
            mid = (low + high) // 2
            if self._f(mid) <= jdn:
                low = mid
            else:
                high = mid
            assert high - low < width, "binary search failed to narrow"

        dd = jdn - self._f(low)
        return t.start_year + low, dd // DAYS_PER_MONTH + 1, dd % DAYS_PER_MONTH + 1

    def to_jdn(self, year: int, month: int, day: int) -> int:
        t = self.table
        dy = t.index(year)
        check_components(month, day, leap=t.flags[dy])
        dd = month * DAYS_PER_MONTH + day - 31
        return t.epoch_jdn + COMMON_YEAR_DAYS * dy + t.leaps_before[dy] + dd

    # ---------------------------------------------------------
    # CalendarEngine protocol
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return self.table.is_leap(year)

    def days_in_year(self, year: int) -> int:
        return COMMON_YEAR_DAYS + self.is_leap_year(year)

    def jdn_to_date(self, jdn: int) -> FrcDate:
        y, m, d = self.to_calendar(jdn)
        return FrcDate(engine=self.id, year=y, month=m, day=d)

    def date_to_jdn(self, year: int, month: int, day: int) -> int:
        return self.to_jdn(year, month, day)

    def offset_to_date(self, offset: int) -> FrcDate:
        return self.jdn_to_date(offset_to_jdn(offset))

    def date_to_offset(self, year: int, month: int, day: int) -> int:
        return jdn_to_offset(self.to_jdn(year, month, day))
