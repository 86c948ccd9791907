from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.time import GregorianLike, today_jdn
from .core.time import from_jdn as _jdn_to_gregorian, to_jdn as _gregorian_to_jdn
from .core.types import EngineSpec, FrcDate
from .engines.factory import make_engine as _make_engine
from .names import format_date as _format_date

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str) -> CalendarEngine:
    return _reg().get(engine)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions (the engine is always named by the caller)
# ============================================================

def from_offset(offset: int, *, engine: str) -> FrcDate:
    return _reg().get(engine).offset_to_date(offset)

def to_offset(year: int, month: int, day: int, *, engine: str) -> int:
    return _reg().get(engine).date_to_offset(year, month, day)

def from_jdn(jdn: int, *, engine: str) -> FrcDate:
    return _reg().get(engine).jdn_to_date(jdn)

def to_jdn(year: int, month: int, day: int, *, engine: str) -> int:
    return _reg().get(engine).date_to_jdn(year, month, day)

def from_gregorian(d: GregorianLike, *, engine: str) -> FrcDate:
    """Gregorian `date` or (year, month, day) -> FRC date."""
    return _reg().get(engine).jdn_to_date(_gregorian_to_jdn(d))

def to_gregorian(t: FrcDate, *, engine: Optional[str] = None) -> date:
    """FRC date -> Gregorian `date`; defaults to the engine that produced `t`."""
    eng = _reg().get(engine if engine is not None else t.engine.name)
    return _jdn_to_gregorian(eng.date_to_jdn(t.year, t.month, t.day))

def today(*, engine: str, local: bool = False, now: Optional[datetime] = None) -> FrcDate:
    return _reg().get(engine).jdn_to_date(today_jdn(local=local, now=now))

def is_leap_year(year: int, *, engine: str) -> bool:
    return _reg().get(engine).is_leap_year(year)

def days_in_year(year: int, *, engine: str) -> int:
    return _reg().get(engine).days_in_year(year)

def format_date(t: FrcDate) -> str:
    return _format_date(t)
