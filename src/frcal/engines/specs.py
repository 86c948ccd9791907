from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..core.types import EngineId, EngineSpec
from .arithmetic import HISTORICAL, ROMME


@dataclass(frozen=True)
class TableSource:
    """Which shipped table to load, and how many of its years to keep (None = all)."""
    resource: str
    max_years: Optional[int] = None


EQUINOX_SPEC = EngineSpec(
    id=EngineId("table", "equinox", "1"),
    payload=TableSource(resource="equinox"),
    meta={
        "description": "Year begins on the day of the true autumn equinox at the Paris Observatory",
        "domain": "JDN",
    },
)

ROMME_SPEC = EngineSpec(
    id=EngineId("arithmetic", "romme", "1"),
    payload=ROMME,
    meta={
        "description": "Gregorian 4/100/400 leap rule applied to the FRC year number",
        "domain": "offset",
    },
)

HISTORICAL_SPEC = EngineSpec(
    id=EngineId("arithmetic", "historical", "1"),
    payload=HISTORICAL,
    meta={
        "description": "Every fourth year sextile, no centurial exception",
        "domain": "offset",
    },
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "equinox": EQUINOX_SPEC,
    "romme": ROMME_SPEC,
    "historical": HISTORICAL_SPEC,
}
