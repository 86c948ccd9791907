from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .errors import UnknownEngine
from .types import EngineId, FrcDate

class CalendarEngine(Protocol):
    id: EngineId

    def info(self) -> Dict[str, Any]: ...
    def offset_to_date(self, offset: int) -> FrcDate: ...
    def date_to_offset(self, year: int, month: int, day: int) -> int: ...
    def jdn_to_date(self, jdn: int) -> FrcDate: ...
    def date_to_jdn(self, year: int, month: int, day: int) -> int: ...
    def is_leap_year(self, year: int) -> bool: ...
    def days_in_year(self, year: int) -> int: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownEngine(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
