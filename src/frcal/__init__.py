"""frcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
Every conversion names its engine ("equinox", "romme" or "historical") explicitly.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
    from_offset,
    to_offset,
    from_jdn,
    to_jdn,
    from_gregorian,
    to_gregorian,
    today,
    is_leap_year,
    days_in_year,
    format_date,
)
from .core.errors import (
    FrcalError,
    InvalidCalendarComponents,
    OutOfRange,
    InvalidGregorianSource,
    ClockUnavailable,
    UnknownEngine,
)
from .core.types import EPOCH_JDN, EngineId, FrcDate, day_of_year

__all__ = [
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "from_offset",
    "to_offset",
    "from_jdn",
    "to_jdn",
    "from_gregorian",
    "to_gregorian",
    "today",
    "is_leap_year",
    "days_in_year",
    "format_date",
    "FrcalError",
    "InvalidCalendarComponents",
    "OutOfRange",
    "InvalidGregorianSource",
    "ClockUnavailable",
    "UnknownEngine",
    "EPOCH_JDN",
    "EngineId",
    "FrcDate",
    "day_of_year",
]
