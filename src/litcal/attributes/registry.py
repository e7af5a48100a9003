from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import ResolvedDay
from ..core.time import dow

AttrFunc = Callable[[ResolvedDay], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(day: ResolvedDay, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](day))
    return out

# helper for attribute implementations
def weekday_index(day: ResolvedDay) -> int:
    return dow(day.date)
