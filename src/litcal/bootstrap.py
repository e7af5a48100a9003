from __future__ import annotations
from litcal.core.engine import CatalogRegistry
from litcal.catalogs.builtin import ALL_CATALOGS

def build_registry() -> CatalogRegistry:
    return CatalogRegistry(dict(ALL_CATALOGS))
