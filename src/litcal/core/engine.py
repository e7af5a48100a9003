from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence

from .types import EventCatalog, JurisdictionLevel


class NameGenerator(Protocol):
    degraded: bool

    def generate(self, event_key: str) -> Optional[str]: ...


@dataclass
class CatalogRegistry:
    _catalogs: Dict[str, EventCatalog]

    def get(self, name: str) -> EventCatalog:
        if name not in self._catalogs:
            raise KeyError(f"Unknown catalog '{name}'. Available: {sorted(self._catalogs)}")
        return self._catalogs[name]

    def list(self) -> List[str]:
        return sorted(self._catalogs.keys())

    def register(self, name: str, catalog: EventCatalog, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._catalogs):
            raise KeyError(f"Catalog '{name}' already exists. Use overwrite=True to replace.")
        self._catalogs[name] = catalog

    def universal(self) -> EventCatalog:
        found = [c for c in self._catalogs.values() if c.jurisdiction.level == JurisdictionLevel.UNIVERSAL]
        if len(found) != 1:
            raise KeyError(f"Expected exactly one universal catalog, found {len(found)}")
        return found[0]

    def overlays(self) -> Sequence[EventCatalog]:
        return [
            self._catalogs[k] for k in sorted(self._catalogs)
            if self._catalogs[k].jurisdiction.level != JurisdictionLevel.UNIVERSAL
        ]
