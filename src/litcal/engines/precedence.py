"""
litcal.engines.precedence
-------------------------
Per-date conflict resolution.

All candidates of a date compare through one totally ordered key:
grade (descending), jurisdiction priority, rank in the Table of Liturgical
Days, then stable identifiers. Commemorations and optional memorials do not
contend for the day; they are attached to a weekday or dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from litcal.core.types import (
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    LiturgicalEvent,
    Outcome,
    Precedence,
    PrecedenceTable,
)


def derive_precedence(event: LiturgicalEvent) -> Precedence:
    """Table rank of an event; an explicit rank on the event wins."""
    if event.precedence is not None:
        return event.precedence
    general = event.jurisdiction.level == JurisdictionLevel.UNIVERSAL
    g = event.grade
    if g == Grade.HIGHER_SOLEMNITY:
        return Precedence.PRIVILEGED_DAY
    if g == Grade.SOLEMNITY:
        return Precedence.GENERAL_SOLEMNITY if general else Precedence.PROPER_SOLEMNITY
    if g == Grade.FEAST_LORD:
        return Precedence.GENERAL_FEAST_OF_THE_LORD if general else Precedence.PROPER_FEAST
    if g == Grade.FEAST:
        return Precedence.GENERAL_FEAST if general else Precedence.PROPER_FEAST
    if g == Grade.MEMORIAL:
        return Precedence.GENERAL_MEMORIAL if general else Precedence.PROPER_MEMORIAL
    if g in (Grade.MEMORIAL_OPT, Grade.COMMEMORATION):
        return Precedence.OPTIONAL_MEMORIAL
    return Precedence.WEEKDAY


@dataclass(frozen=True)
class Candidate:
    """An event instance pending resolution on its original date."""
    event: LiturgicalEvent
    date: date
    precedence: Precedence
    privileged_weekday: bool = False

    @classmethod
    def of(cls, event: LiturgicalEvent, d: date, *, privileged_weekday: bool = False) -> "Candidate":
        return cls(event=event, date=d, precedence=derive_precedence(event), privileged_weekday=privileged_weekday)

    @property
    def event_key(self) -> str:
        return self.event.event_key

    @property
    def jurisdiction(self) -> Jurisdiction:
        return self.event.jurisdiction

    @property
    def reduced(self) -> bool:
        """Obligatory memorial falling on a privileged weekday."""
        return self.privileged_weekday and self.event.grade == Grade.MEMORIAL

    @property
    def grade(self) -> Grade:
        return Grade.COMMEMORATION if self.reduced else self.event.grade

    @property
    def coexists(self) -> bool:
        return self.grade in (Grade.COMMEMORATION, Grade.MEMORIAL_OPT)


@dataclass(frozen=True)
class Verdict:
    candidate: Candidate
    outcome: Outcome
    reason: Optional[str] = None


@dataclass(frozen=True)
class DayResolution:
    date: date
    winner: Optional[Candidate]
    verdicts: Tuple[Verdict, ...]    # winner first, then the day's other candidates in rank order
    carried: Tuple[Candidate, ...]   # pending transfers that did not land on this date

    @property
    def transfers(self) -> Tuple[Candidate, ...]:
        return tuple(v.candidate for v in self.verdicts if v.outcome == Outcome.TRANSFERRED_FROM)

    @property
    def landed(self) -> Optional[Candidate]:
        for v in self.verdicts:
            if v.outcome == Outcome.TRANSFERRED_TO:
                return v.candidate
        return None


class PrecedenceResolver:
    def __init__(self, table: Optional[PrecedenceTable] = None):
        self.table = table if table is not None else PrecedenceTable()

    def sort_key(self, c: Candidate) -> Tuple:
        return (
            -int(c.grade),
            self.table.jurisdiction_rank(c.jurisdiction.level),
            int(c.precedence),
            c.date,
            c.jurisdiction.code or "",
            c.event_key,
        )

    def rank(self, candidates: Sequence[Candidate]) -> List[Candidate]:
        return sorted(candidates, key=self.sort_key)

    def resolve(self, d: date, natives: Sequence[Candidate], carried: Sequence[Candidate] = ()) -> DayResolution:
        """
        Resolve one date.

        `natives` fall on d; `carried` are must-celebrate events transferred
        from earlier dates. A carried event lands on d only when no
        contending native has an equal or higher grade.
        """
        ranked = self.rank(natives)
        contenders = [c for c in ranked if not c.coexists]
        pending = self.rank(carried)

        landed = None
        for c in pending:
            if not contenders or c.grade > contenders[0].grade:
                landed = c
                break

        if landed is not None:
            winner = landed
        elif contenders:
            winner = contenders[0]
        elif ranked:
            winner = ranked[0]
        else:
            winner = None

        verdicts: List[Verdict] = []
        if winner is not None:
            if winner is landed:
                verdicts.append(Verdict(winner, Outcome.TRANSFERRED_TO, f"transferred from {winner.date.isoformat()}"))
            else:
                verdicts.append(Verdict(winner, Outcome.CELEBRATED))
        for c in ranked:
            if c is not winner:
                verdicts.append(self._judge(c, winner))

        return DayResolution(
            date=d,
            winner=winner,
            verdicts=tuple(verdicts),
            carried=tuple(c for c in pending if c is not landed),
        )

    def _judge(self, c: Candidate, top: Candidate) -> Verdict:
        if c.event_key == top.event_key:
            return Verdict(c, Outcome.SUPPRESSED, f"superseded by the {top.jurisdiction} instance")
        if c.coexists:
            if top.grade == Grade.WEEKDAY:
                reason = "memorial on a privileged weekday" if c.reduced else None
                return Verdict(c, Outcome.COMMEMORATED, reason)
            return Verdict(c, Outcome.SUPPRESSED, f"impeded by {top.event_key} ({top.grade.name})")
        if c.event.transferable:
            return Verdict(c, Outcome.TRANSFERRED_FROM, f"impeded by {top.event_key} ({top.grade.name})")
        return Verdict(c, Outcome.SUPPRESSED, f"impeded by {top.event_key} ({top.grade.name})")
