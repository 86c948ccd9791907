"""
frcal.engines.factory
---------------------
Transforms pure data specifications into live engine objects.
"""

from __future__ import annotations
from frcal.core.engine import CalendarEngine
from frcal.core.errors import UnknownEngine
from frcal.core.types import EngineSpec
from frcal.engines.arithmetic import ArithmeticEngine, LeapCycle
from frcal.engines.leap_table import LeapYearTable
from frcal.engines.specs import TableSource
from frcal.engines.table_engine import TableEngine


def build_table(source: TableSource) -> LeapYearTable:
    if source.resource == "equinox":
        return LeapYearTable.load_equinox(max_years=source.max_years)
    raise UnknownEngine(f"Unknown leap table resource '{source.resource}'")


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if isinstance(spec.payload, LeapCycle):
        return ArithmeticEngine(spec.id, spec.payload)
    if isinstance(spec.payload, TableSource):
        return TableEngine(spec.id, build_table(spec.payload))
    raise TypeError(f"Unknown engine payload type: {type(spec.payload)}")
