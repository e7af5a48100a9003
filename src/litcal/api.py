from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CatalogRegistry
from .core.types import (
    CalendarConfig,
    CalendarYear,
    Diagnostics,
    EventCatalog,
    Jurisdictions,
    LitSeason,
    ResolvedDay,
    YearType,
)
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .attributes.registry import available_attributes, compute_attributes
from .engines.assembler import CalendarAssembler, year_span
from .engines.computus import compute_anchors, compute_easter
from .engines.ferial_names import generate_name, season_name as _season_name
from .engines.locale import LocaleContext

_registry: Optional[CatalogRegistry] = None

def set_registry(reg: CatalogRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CatalogRegistry:
    if _registry is None:
        raise RuntimeError("Catalog registry not initialized")
    return _registry

def list_catalogs() -> List[str]:
    return _reg().list()

def catalog_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def register_catalog(name: str, catalog: EventCatalog, *, overwrite: bool = False) -> None:
    _reg().register(name, catalog, overwrite=overwrite)

# ============================================================
# Computus and names
# ============================================================

def easter(year: int) -> date:
    return compute_easter(year)

def anchors(year: int) -> Dict[str, Optional[date]]:
    return compute_anchors(year).as_dict()

def ferial_name(event_key: str, *, locale: str = "en") -> Optional[str]:
    return generate_name(event_key, locale)

def season_name(season: LitSeason, *, locale: str = "en") -> str:
    return _season_name(LitSeason(season), LocaleContext.create(locale))

def list_attributes() -> List[str]:
    return available_attributes()

# ============================================================
# Calendars
# ============================================================

def _config(config: Optional[CalendarConfig], year_type: Optional[YearType]) -> CalendarConfig:
    cfg = config if config is not None else CalendarConfig()
    if year_type is not None:
        cfg = cfg.tweak(year_type=YearType(year_type))
    return cfg

def _assembler(overlay_sources: Optional[Sequence[EventCatalog]], config: CalendarConfig) -> CalendarAssembler:
    reg = _reg()
    overlays = list(reg.overlays())
    if overlay_sources:
        overlays.extend(overlay_sources)
    return CalendarAssembler(reg.universal(), overlays, config=config)

def compute_calendar(
    year: int,
    *,
    locale: str = "en",
    nation: Optional[str] = None,
    diocese: Optional[str] = None,
    wider_region: Optional[str] = None,
    overlay_sources: Optional[Sequence[EventCatalog]] = None,
    year_type: Optional[YearType] = None,
    config: Optional[CalendarConfig] = None,
) -> Tuple[CalendarYear, Diagnostics]:
    """
    Resolved calendar of `year` from the registered catalogs.

    Extra catalogs in `overlay_sources` are considered next to the
    registered ones (e.g. a diocesan calendar loaded from JSON).
    """
    cfg = _config(config, year_type)
    jur = Jurisdictions(nation=nation, diocese=diocese, wider_region=wider_region)
    return _assembler(overlay_sources, cfg).assemble(year, locale, jur)

def day_info(
    d: date,
    *,
    locale: str = "en",
    nation: Optional[str] = None,
    diocese: Optional[str] = None,
    wider_region: Optional[str] = None,
    overlay_sources: Optional[Sequence[EventCatalog]] = None,
    attributes: Sequence[str] = (),
    config: Optional[CalendarConfig] = None,
) -> ResolvedDay:
    cfg = _config(config, YearType.CIVIL)
    cal, _ = compute_calendar(
        d.year, locale=locale, nation=nation, diocese=diocese, wider_region=wider_region,
        overlay_sources=overlay_sources, config=cfg,
    )
    day = cal[d]
    if attributes:
        attrs = compute_attributes(day, attributes)
        day = replace(day, attributes=attrs)
    return day

def explain(
    d: date,
    *,
    locale: str = "en",
    nation: Optional[str] = None,
    diocese: Optional[str] = None,
    wider_region: Optional[str] = None,
    overlay_sources: Optional[Sequence[EventCatalog]] = None,
    config: Optional[CalendarConfig] = None,
) -> Dict[str, Any]:
    """Resolution of one date with the diagnostics touching it."""
    cfg = _config(config, YearType.CIVIL)
    cal, diag = compute_calendar(
        d.year, locale=locale, nation=nation, diocese=diocese, wider_region=wider_region,
        overlay_sources=overlay_sources, config=cfg,
    )
    start, end = year_span(d.year, cfg.year_type)
    return {
        "date": d.isoformat(),
        "span": [start.isoformat(), end.isoformat()],
        "jurisdictions": [str(j) for j in cal.jurisdictions],
        "jurisdiction_order": [x.value for x in cfg.precedence.jurisdiction_order],
        "day": cal[d].to_dict(),
        "diagnostics": [e.to_dict() for e in diag if d in (e.on, e.target)],
    }
