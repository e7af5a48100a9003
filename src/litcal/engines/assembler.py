"""
litcal.engines.assembler
------------------------
The Orchestrator. Binds the overlay merger, the precedence resolver and the
name generator together, walking the requested span one date at a time and
carrying impeded must-celebrate events forward until they find an open date.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from litcal.core.engine import NameGenerator
from litcal.core.errors import ConfigurationError
from litcal.core.time import date_range
from litcal.core.types import (
    CalendarConfig,
    CalendarYear,
    DiagnosticEntry,
    DiagnosticKind,
    Diagnostics,
    EventCatalog,
    Grade,
    JurisdictionLevel,
    Jurisdictions,
    LiturgicalEvent,
    Outcome,
    ResolvedDay,
    ResolvedEntry,
    YearType,
)
from litcal.engines.computus import advent_start, compute_anchors, compute_easter
from litcal.engines.ferial_names import FerialNameGenerator
from litcal.engines.lectionary import lectionary_category, readings_cycle, readings_type, sunday_cycle, weekday_cycle
from litcal.engines.locale import LocaleContext, normalize_tag
from litcal.engines.overlay import MergeResult, merge
from litcal.engines.precedence import Candidate, PrecedenceResolver, Verdict
from litcal.engines.seasons import season_for_date

logger = logging.getLogger(__name__)

_OUTCOME_ORDER = {
    Outcome.CELEBRATED: 0,
    Outcome.TRANSFERRED_TO: 0,
    Outcome.COMMEMORATED: 1,
    Outcome.TRANSFERRED_FROM: 2,
    Outcome.SUPPRESSED: 3,
}


def year_span(year: int, year_type: YearType = YearType.CIVIL) -> Tuple[date, date]:
    """First and last date of a calendar year of the given type (inclusive)."""
    if year_type == YearType.LITURGICAL:
        return advent_start(year - 1), advent_start(year) - timedelta(days=1)
    return date(year, 1, 1), date(year, 12, 31)


# ============================================================
# Names
# ============================================================

class EventNamer:
    """
    Display names for one request locale.

    Literal names are looked up for the exact tag and its base language,
    then generated for events with a name pattern, then taken from the
    fallback language; as a last resort the event key itself is shown.
    """

    def __init__(self, locale: str, *, fallback: str = "en", generator: Optional[NameGenerator] = None):
        self.ctx = LocaleContext.create(locale, fallback=fallback)
        self.generator: NameGenerator = generator if generator is not None else FerialNameGenerator(self.ctx)
        self.fallback = normalize_tag(fallback)
        requested = normalize_tag(locale)
        tags = [requested, requested.split("_")[0]]
        self.literal_tags = [t for i, t in enumerate(tags) if t not in tags[:i] and t != self.fallback]

    @property
    def degraded(self) -> bool:
        return self.ctx.degraded or self.generator.degraded

    def name(self, event: LiturgicalEvent) -> Tuple[str, bool]:
        """(name, fell_back)"""
        for tag in self.literal_tags:
            if tag in event.i18n:
                return event.i18n[tag], False
        if event.name_pattern is not None:
            generated = self.generator.generate(event.event_key)
            if generated is not None:
                return generated, False
        if self.fallback in event.i18n:
            return event.i18n[self.fallback], bool(self.literal_tags)
        return event.event_key, True


# ============================================================
# Assembler
# ============================================================

class CalendarAssembler:
    def __init__(
        self,
        universal: EventCatalog,
        overlays: Sequence[EventCatalog] = (),
        *,
        config: Optional[CalendarConfig] = None,
    ):
        self.universal = universal
        self.overlays = tuple(overlays)
        self.config = config if config is not None else CalendarConfig()
        self.resolver = PrecedenceResolver(self.config.precedence)

    def info(self) -> Dict[str, object]:
        return {
            "universal": self.universal.name,
            "overlays": [str(c.jurisdiction) for c in self.overlays],
            "jurisdiction_order": [x.value for x in self.config.precedence.jurisdiction_order],
            "year_type": self.config.year_type.value,
            "fallback_locale": self.config.fallback_locale,
        }

    def assemble(
        self,
        year: int,
        locale: str = "en",
        jurisdictions: Optional[Jurisdictions] = None,
    ) -> Tuple[CalendarYear, Diagnostics]:
        jur = jurisdictions if jurisdictions is not None else Jurisdictions()
        start, end = year_span(year, self.config.year_type)

        merged: Dict[int, MergeResult] = {}
        for y in range(start.year, end.year + 1):
            merged[y] = merge(
                self.universal, self.overlays, y, jur,
                anchors=compute_anchors(y), table=self.config.precedence,
            )

        diagnostics: List[DiagnosticEntry] = [
            e for m in merged.values() for e in m.diagnostics
            if e.on is None or start <= e.on <= end
        ]

        # ---------------------------------------------------------
        # Forward pass
        # ---------------------------------------------------------
        verdicts: Dict[date, List[Verdict]] = {}
        landed_on: Dict[Candidate, date] = {}
        carried: List[Candidate] = []
        for d in date_range(start, end):
            res = self.resolver.resolve(d, merged[d.year].on(d), carried)
            for v in res.verdicts:
                if v.outcome == Outcome.TRANSFERRED_TO:
                    landed_on[v.candidate] = d
                    logger.debug("%s transferred from %s to %s", v.candidate.event_key, v.candidate.date, d)
                elif v.outcome == Outcome.TRANSFERRED_FROM:
                    logger.debug("%s impeded on %s: %s", v.candidate.event_key, d, v.reason)
            verdicts[d] = list(res.verdicts)
            carried = list(res.carried) + list(res.transfers)

        # Transfers that found no open date before the end of the span
        for c in carried:
            msg = f"{c.event_key} ({c.jurisdiction}) impeded on {c.date.isoformat()} found no open date before {end.isoformat()}"
            logger.warning(msg)
            diagnostics.append(DiagnosticEntry(
                kind=DiagnosticKind.UNRESOLVED_TRANSFER,
                message=msg,
                event_key=c.event_key,
                jurisdiction=c.jurisdiction,
                on=c.date,
            ))
            day = verdicts[c.date]
            for i, v in enumerate(day):
                if v.candidate is c:
                    day[i] = Verdict(c, Outcome.SUPPRESSED, f"{v.reason}; no open date for the transfer")

        # ---------------------------------------------------------
        # Entries
        # ---------------------------------------------------------
        namer = EventNamer(locale, fallback=self.config.fallback_locale)
        if namer.degraded:
            diagnostics.append(DiagnosticEntry(
                kind=DiagnosticKind.LOCALE_FALLBACK,
                message=f"Locale '{locale}' is not fully supported; generated names use '{namer.generator.language}'",
            ))
        named_fallbacks = set()

        days: List[ResolvedDay] = []
        for d in date_range(start, end):
            season = season_for_date(d, merged[d.year].anchors)
            entries = []
            for v in sorted(verdicts[d], key=lambda v: _OUTCOME_ORDER[v.outcome]):
                c = v.candidate
                name, fell_back = namer.name(c.event)
                key = (c.event_key, c.jurisdiction)
                if fell_back and key not in named_fallbacks:
                    named_fallbacks.add(key)
                    diagnostics.append(DiagnosticEntry(
                        kind=DiagnosticKind.NAME_FALLBACK,
                        message=f"No '{locale}' name for {c.event_key}; showing '{name}'",
                        event_key=c.event_key,
                        jurisdiction=c.jurisdiction,
                        on=d,
                    ))
                category = lectionary_category(c.event)
                entries.append(ResolvedEntry(
                    event_key=c.event_key,
                    name=name,
                    outcome=v.outcome,
                    grade=c.grade,
                    color=c.event.color,
                    jurisdiction=c.jurisdiction,
                    season=season,
                    lectionary=category,
                    readings_cycle=readings_cycle(category, d),
                    readings_type=readings_type(c.event),
                    transferred_from=c.date if v.outcome == Outcome.TRANSFERRED_TO else None,
                    transferred_to=landed_on.get(c) if v.outcome == Outcome.TRANSFERRED_FROM else None,
                    reason=v.reason,
                    event=c.event,
                ))
                self._report(v, d, landed_on, diagnostics)
            days.append(ResolvedDay(date=d, entries=tuple(entries)))

        cal = CalendarYear(
            year=year,
            year_type=self.config.year_type,
            locale=locale,
            easter=compute_easter(year),
            jurisdictions=merged[year].scope,
            sunday_cycle=sunday_cycle(year),
            weekday_cycle=weekday_cycle(year),
            days=tuple(days),
        )
        diag = Diagnostics(tuple(diagnostics))
        logger.info(
            "computed %s year %d (%s, %s): %d days, %d transfers, %d unresolved",
            self.config.year_type.value.lower(), year, locale,
            "/".join(str(j) for j in cal.jurisdictions), len(cal),
            len(diag.transfers), len(diag.unresolved),
        )
        return cal, diag

    @staticmethod
    def _report(v: Verdict, d: date, landed_on: Dict[Candidate, date], out: List[DiagnosticEntry]) -> None:
        c = v.candidate
        if v.outcome == Outcome.TRANSFERRED_FROM:
            target = landed_on[c]
            out.append(DiagnosticEntry(
                kind=DiagnosticKind.TRANSFER,
                message=f"{c.event_key} transferred from {d.isoformat()} to {target.isoformat()} ({v.reason})",
                event_key=c.event_key,
                jurisdiction=c.jurisdiction,
                on=d,
                target=target,
            ))
        elif v.outcome == Outcome.SUPPRESSED and c.grade > Grade.WEEKDAY:
            out.append(DiagnosticEntry(
                kind=DiagnosticKind.SUPPRESSION,
                message=f"{c.event_key} suppressed on {d.isoformat()} ({v.reason})",
                event_key=c.event_key,
                jurisdiction=c.jurisdiction,
                on=d,
            ))


def _split_sources(
    overlay_sources: Sequence[EventCatalog],
    universal: Optional[EventCatalog],
) -> Tuple[EventCatalog, List[EventCatalog]]:
    if universal is not None:
        return universal, [c for c in overlay_sources if c is not universal]
    found = [c for c in overlay_sources if c.jurisdiction.level == JurisdictionLevel.UNIVERSAL]
    if len(found) != 1:
        raise ConfigurationError(f"Expected exactly one universal catalog among the sources, found {len(found)}")
    return found[0], [c for c in overlay_sources if c is not found[0]]


def compute_calendar(
    year: int,
    locale: str,
    jurisdictions: Optional[Jurisdictions],
    overlay_sources: Sequence[EventCatalog],
    *,
    universal: Optional[EventCatalog] = None,
    config: Optional[CalendarConfig] = None,
) -> Tuple[CalendarYear, Diagnostics]:
    """
    Resolved calendar of one year.

    `overlay_sources` holds the catalogs to choose from; unless `universal`
    is given, exactly one of them must be universal.
    """
    uni, rest = _split_sources(overlay_sources, universal)
    return CalendarAssembler(uni, rest, config=config).assemble(year, locale, jurisdictions)
