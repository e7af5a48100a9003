"""
litcal.engines.overlay
----------------------
Calendar overlay merger.

Selects the catalogs that apply to a jurisdiction filter, expands their date
rules for one civil year and groups the resulting event instances by date.
Nothing is resolved here: every instance that occurs in the year becomes a
Candidate for the precedence resolver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from litcal.core.errors import ConfigurationError
from litcal.core.types import (
    DiagnosticEntry,
    DiagnosticKind,
    EventCatalog,
    Jurisdiction,
    JurisdictionLevel,
    Jurisdictions,
    LiturgicalEvent,
    PrecedenceTable,
)
from litcal.engines.computus import LiturgicalAnchors, compute_anchors
from litcal.engines.precedence import Candidate
from litcal.engines.seasons import is_privileged_weekday, resolve_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    year: int
    scope: Tuple[Jurisdiction, ...]
    candidates: Dict[date, Tuple[Candidate, ...]]
    diagnostics: Tuple[DiagnosticEntry, ...] = ()
    anchors: Optional[LiturgicalAnchors] = None

    def on(self, d: date) -> Tuple[Candidate, ...]:
        return self.candidates.get(d, ())


def _code(x: Optional[str]) -> Optional[str]:
    return x.upper() if x else None


def _only(catalogs: Sequence[EventCatalog], what: str) -> Optional[EventCatalog]:
    if len(catalogs) > 1:
        raise ConfigurationError(f"More than one catalog supplied for {what}: {[c.name for c in catalogs]}")
    return catalogs[0] if catalogs else None


# ============================================================
# Catalog selection
# ============================================================

def select_catalogs(
    universal: EventCatalog,
    overlays: Sequence[EventCatalog],
    jurisdictions: Jurisdictions,
) -> List[EventCatalog]:
    """
    Catalogs applying to the filter, weakest scope first:
    universal, wider regions, nation, diocese.
    """
    if universal.jurisdiction.level != JurisdictionLevel.UNIVERSAL:
        raise ConfigurationError(f"'{universal.name}' is not a universal catalog ({universal.jurisdiction})")

    nation = _code(jurisdictions.nation)
    diocese = _code(jurisdictions.diocese)
    region = _code(jurisdictions.wider_region)

    def at(level: JurisdictionLevel, code: Optional[str] = None) -> List[EventCatalog]:
        return [
            c for c in overlays
            if c.jurisdiction.level == level and (code is None or _code(c.jurisdiction.code) == code)
        ]

    diocesan = None
    if diocese is not None:
        diocesan = _only(at(JurisdictionLevel.DIOCESAN, diocese), f"diocese '{diocese}'")
        if diocesan is None:
            raise ConfigurationError(f"Unknown diocese '{diocese}'")
        parent = _code(diocesan.parent)
        if parent is None:
            raise ConfigurationError(f"Diocese '{diocese}' does not name its nation")
        if nation is None:
            nation = parent
        elif nation != parent:
            raise ConfigurationError(f"Diocese '{diocese}' belongs to '{parent}', not '{nation}'")

    national = None
    if nation is not None:
        national = _only(at(JurisdictionLevel.NATIONAL, nation), f"nation '{nation}'")
        if national is None:
            raise ConfigurationError(f"Unknown nation '{nation}'")

    locals_ = {x for x in (nation, diocese) if x is not None}
    if region is not None:
        wider = _only(at(JurisdictionLevel.WIDER_REGION, region), f"wider region '{region}'")
        if wider is None:
            raise ConfigurationError(f"Unknown wider region '{region}'")
        members = {_code(m) for m in wider.members}
        if locals_ and not (locals_ & members):
            raise ConfigurationError(f"'{'/'.join(sorted(locals_))}' is not part of wider region '{region}'")
        regions = [wider]
    else:
        regions = [
            c for c in at(JurisdictionLevel.WIDER_REGION)
            if locals_ & {_code(m) for m in c.members}
        ]
        regions.sort(key=lambda c: c.jurisdiction.code or "")

    out = [universal] + regions
    if national is not None:
        out.append(national)
    if diocesan is not None:
        out.append(diocesan)
    return out


# ============================================================
# Merge
# ============================================================

def effective_anchors(catalogs: Sequence[EventCatalog], anchors: LiturgicalAnchors) -> LiturgicalAnchors:
    """Anchors after the most specific catalog's Epiphany setting."""
    on_sunday = False
    for cat in catalogs:
        if cat.epiphany_on_sunday is not None:
            on_sunday = cat.epiphany_on_sunday
    return anchors.with_epiphany_on_sunday() if on_sunday else anchors


def _expand(catalog: EventCatalog, year: int, anchors: LiturgicalAnchors) -> List[Tuple[LiturgicalEvent, date]]:
    seen: Dict[str, LiturgicalEvent] = {}
    out: List[Tuple[LiturgicalEvent, date]] = []
    for ev in catalog.events:
        if ev.jurisdiction != catalog.jurisdiction:
            raise ConfigurationError(
                f"Event '{ev.event_key}' is tagged {ev.jurisdiction} inside catalog '{catalog.name}' ({catalog.jurisdiction})"
            )
        if not ev.valid_in(year):
            logger.debug("%s %s outside validity window in %d", catalog.jurisdiction, ev.event_key, year)
            continue
        if ev.event_key in seen:
            raise ConfigurationError(f"Duplicate event key '{ev.event_key}' in {catalog.jurisdiction} for {year}")
        seen[ev.event_key] = ev
        try:
            d = resolve_rule(ev.date_rule, year, anchors)
        except ConfigurationError as e:
            raise ConfigurationError(f"{catalog.jurisdiction} event '{ev.event_key}': {e}") from e
        if d is None:
            logger.debug("%s %s does not occur in %d", catalog.jurisdiction, ev.event_key, year)
            continue
        out.append((ev, d))
    return out


def merge(
    universal: EventCatalog,
    overlays: Sequence[EventCatalog],
    year: int,
    jurisdictions: Jurisdictions,
    *,
    anchors: Optional[LiturgicalAnchors] = None,
    table: Optional[PrecedenceTable] = None,
) -> MergeResult:
    """Dated candidates of one civil year for the selected jurisdictions."""
    tbl = table if table is not None else PrecedenceTable()
    catalogs = select_catalogs(universal, overlays, jurisdictions)
    a = effective_anchors(catalogs, anchors if anchors is not None else compute_anchors(year))

    instances: List[Tuple[LiturgicalEvent, date]] = []
    for cat in catalogs:
        instances.extend(_expand(cat, year, a))

    def priority(ev: LiturgicalEvent) -> int:
        return tbl.jurisdiction_rank(ev.jurisdiction.level)

    # An overriding instance removes same-key instances of weaker jurisdictions
    strongest: Dict[str, LiturgicalEvent] = {}
    for ev, _ in instances:
        if ev.overrides:
            cur = strongest.get(ev.event_key)
            if cur is None or priority(ev) < priority(cur):
                strongest[ev.event_key] = ev

    diagnostics: List[DiagnosticEntry] = []
    grouped: Dict[date, List[Candidate]] = {}
    for ev, d in instances:
        winner = strongest.get(ev.event_key)
        if winner is not None and priority(ev) > priority(winner):
            logger.debug("%s overrides %s instance of %s", winner.jurisdiction, ev.jurisdiction, ev.event_key)
            diagnostics.append(DiagnosticEntry(
                kind=DiagnosticKind.OVERRIDE,
                message=f"{ev.event_key} of {ev.jurisdiction} replaced by the {winner.jurisdiction} instance",
                event_key=ev.event_key,
                jurisdiction=ev.jurisdiction,
                on=d,
            ))
            continue
        grouped.setdefault(d, []).append(Candidate.of(ev, d, privileged_weekday=is_privileged_weekday(d, a)))

    logger.debug("merged %d catalogs for %d: %d candidates on %d dates",
                 len(catalogs), year, sum(len(v) for v in grouped.values()), len(grouped))
    return MergeResult(
        year=year,
        scope=tuple(c.jurisdiction for c in catalogs),
        candidates={d: tuple(grouped[d]) for d in sorted(grouped)},
        diagnostics=tuple(diagnostics),
        anchors=a,
    )
