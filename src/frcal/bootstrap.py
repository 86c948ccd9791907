from __future__ import annotations
import logging

from frcal.core.engine import EngineRegistry
from frcal.engines.specs import ALL_SPECS
from frcal.engines.factory import make_engine

log = logging.getLogger(__name__)

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    log.debug("Registered engines: %s", ", ".join(sorted(engines)))
    return EngineRegistry(engines)
