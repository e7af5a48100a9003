"""Built-in catalogs, keyed by registry name."""
from __future__ import annotations

from typing import Dict

from ..core.types import EventCatalog
from .general import GENERAL_ROMAN
from .overlays import DIOCESAN_ROME, NATIONAL_IT, NATIONAL_US, WIDER_REGION_EUROPE

ALL_CATALOGS: Dict[str, EventCatalog] = {
    "general-roman": GENERAL_ROMAN,
    "it": NATIONAL_IT,
    "us": NATIONAL_US,
    "rome": DIOCESAN_ROME,
    "europe": WIDER_REGION_EUROPE,
}
