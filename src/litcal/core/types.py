from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import ConfigurationError


# ============================================================
# Ordered enumerations
# ============================================================

class Grade(IntEnum):
    WEEKDAY = 0
    COMMEMORATION = 1
    MEMORIAL_OPT = 2
    MEMORIAL = 3
    FEAST = 4
    FEAST_LORD = 5
    SOLEMNITY = 6
    HIGHER_SOLEMNITY = 7


class Precedence(IntEnum):
    """Table of Liturgical Days; a lower value is the stronger rank."""
    TRIDUUM = 1
    PRIVILEGED_DAY = 2
    GENERAL_SOLEMNITY = 3
    PROPER_SOLEMNITY = 4
    GENERAL_FEAST_OF_THE_LORD = 5
    SUNDAY = 6
    GENERAL_FEAST = 7
    PROPER_FEAST = 8
    PRIVILEGED_WEEKDAY = 9
    GENERAL_MEMORIAL = 10
    PROPER_MEMORIAL = 11
    OPTIONAL_MEMORIAL = 12
    WEEKDAY = 13


class JurisdictionLevel(str, Enum):
    UNIVERSAL = "universal"
    WIDER_REGION = "widerregion"
    NATIONAL = "national"
    DIOCESAN = "diocesan"


class Color(str, Enum):
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    ROSE = "rose"
    BLACK = "black"


class Outcome(str, Enum):
    CELEBRATED = "celebrated"
    COMMEMORATED = "commemorated"
    TRANSFERRED_FROM = "transferred_from"
    TRANSFERRED_TO = "transferred_to"
    SUPPRESSED = "suppressed"


class LitSeason(str, Enum):
    ADVENT = "ADVENT"
    CHRISTMAS = "CHRISTMAS"
    LENT = "LENT"
    EASTER_TRIDUUM = "EASTER_TRIDUUM"
    EASTER = "EASTER"
    ORDINARY_TIME = "ORDINARY_TIME"


class YearType(str, Enum):
    CIVIL = "CIVIL"
    LITURGICAL = "LITURGICAL"


class LectionaryCategory(str, Enum):
    SUNDAYS_SOLEMNITIES = "sundays_solemnities"
    WEEKDAYS_ADVENT = "weekdays_advent"
    WEEKDAYS_CHRISTMAS = "weekdays_christmas"
    WEEKDAYS_LENT = "weekdays_lent"
    WEEKDAYS_EASTER = "weekdays_easter"
    WEEKDAYS_ORDINARY = "weekdays_ordinary"
    SANCTORUM = "sanctorum"

    @property
    def has_year_cycle(self) -> bool:
        return self in (LectionaryCategory.SUNDAYS_SOLEMNITIES, LectionaryCategory.WEEKDAYS_ORDINARY)


class ReadingsType(str, Enum):
    """Shape of the set of readings an event carries in the lectionary."""
    CHRISTMAS = "christmas"                    # vigil, night, dawn and day Masses
    FESTIVE_WITH_VIGIL = "festive_with_vigil"
    EASTER_VIGIL = "easter_vigil"
    PALM_SUNDAY = "palm_sunday"                # with the Gospel of the procession
    WITH_EVENING = "with_evening"
    MULTIPLE_SCHEMAS = "multiple_schemas"
    SEASONAL = "seasonal"                      # inside and outside Eastertide
    FESTIVE = "festive"
    FERIAL = "ferial"


class DiagnosticKind(str, Enum):
    TRANSFER = "transfer"
    SUPPRESSION = "suppression"
    UNRESOLVED_TRANSFER = "unresolved_transfer"
    LOCALE_FALLBACK = "locale_fallback"
    NAME_FALLBACK = "name_fallback"
    OVERRIDE = "override"


# ============================================================
# Date rules (closed tagged union)
# ============================================================

@dataclass(frozen=True)
class FixedDate:
    month: int
    day: int

@dataclass(frozen=True)
class EasterOffset:
    days: Optional[int]

@dataclass(frozen=True)
class AnchorOffset:
    anchor: str
    days: Optional[int] = 0

@dataclass(frozen=True)
class SeasonWeekday:
    season: LitSeason
    week: int
    weekday: int  # 0=Sunday..6=Saturday

@dataclass(frozen=True)
class SeasonDate:
    """A calendar date that exists only as a weekday of the given season."""
    season: LitSeason
    month: int
    day: int
    after_epiphany: bool = False  # January days after a fixed Jan 6 Epiphany

DateRule = Union[FixedDate, EasterOffset, AnchorOffset, SeasonWeekday, SeasonDate]


# ============================================================
# Events and catalogs
# ============================================================

@dataclass(frozen=True)
class Jurisdiction:
    level: JurisdictionLevel
    code: Optional[str] = None

    def __str__(self) -> str:
        if self.code is None:
            return self.level.value
        return f"{self.level.value}:{self.code}"

UNIVERSAL = Jurisdiction(JurisdictionLevel.UNIVERSAL)


@dataclass(frozen=True)
class LiturgicalEvent:
    event_key: str
    date_rule: DateRule
    grade: Grade
    color: Tuple[Color, ...] = (Color.WHITE,)
    jurisdiction: Jurisdiction = UNIVERSAL
    common: Tuple[str, ...] = ()
    since_year: Optional[int] = None
    until_year: Optional[int] = None
    i18n: Mapping[str, str] = field(default_factory=dict, hash=False)
    name_pattern: Optional[str] = None
    must_celebrate: Optional[bool] = None
    precedence: Optional[Precedence] = None
    overrides: bool = False
    temporale: bool = False
    readings: Optional[ReadingsType] = None  # None: derived from the event key

    def __post_init__(self) -> None:
        for name in ("since_year", "until_year"):
            v = getattr(self, name)
            if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
                raise ConfigurationError(f"'{self.event_key}': {name} must be an integer, got {v!r}")

    @property
    def transferable(self) -> bool:
        if self.must_celebrate is not None:
            return self.must_celebrate
        return self.grade >= Grade.SOLEMNITY

    def valid_in(self, year: int) -> bool:
        if self.since_year is not None and year < self.since_year:
            return False
        if self.until_year is not None and year > self.until_year:
            return False
        return True

    def tweak(self, **kwargs: Any) -> "LiturgicalEvent":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class EventCatalog:
    """A jurisdiction's event definitions as supplied by a loader."""
    name: str
    jurisdiction: Jurisdiction
    events: Tuple[LiturgicalEvent, ...]
    parent: Optional[str] = None          # nation code of a diocese
    members: FrozenSet[str] = frozenset()  # nation/diocese codes of a wider region
    epiphany_on_sunday: Optional[bool] = None  # None: inherit from the broader calendar

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "jurisdiction": str(self.jurisdiction),
            "parent": self.parent,
            "members": sorted(self.members),
            "events": len(self.events),
            "epiphany_on_sunday": self.epiphany_on_sunday,
        }


@dataclass(frozen=True)
class Jurisdictions:
    """Requested jurisdiction filter; universal is always included."""
    nation: Optional[str] = None
    diocese: Optional[str] = None
    wider_region: Optional[str] = None


# ============================================================
# Configuration
# ============================================================

DEFAULT_JURISDICTION_ORDER: Tuple[JurisdictionLevel, ...] = (
    JurisdictionLevel.DIOCESAN,
    JurisdictionLevel.NATIONAL,
    JurisdictionLevel.WIDER_REGION,
    JurisdictionLevel.UNIVERSAL,
)

@dataclass(frozen=True)
class PrecedenceTable:
    """Jurisdiction priority used to break ties between equal grades (first = strongest)."""
    jurisdiction_order: Tuple[JurisdictionLevel, ...] = DEFAULT_JURISDICTION_ORDER

    def __post_init__(self) -> None:
        order = tuple(JurisdictionLevel(x) for x in self.jurisdiction_order)
        if sorted(x.value for x in order) != sorted(x.value for x in JurisdictionLevel):
            raise ConfigurationError(
                f"jurisdiction_order must list each of {[x.value for x in JurisdictionLevel]} once, "
                f"got {[x.value for x in order]}"
            )
        object.__setattr__(self, "jurisdiction_order", order)

    def jurisdiction_rank(self, level: JurisdictionLevel) -> int:
        return self.jurisdiction_order.index(level)

    def tweak(self, **kwargs: Any) -> "PrecedenceTable":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class CalendarConfig:
    precedence: PrecedenceTable = field(default_factory=PrecedenceTable)
    year_type: YearType = YearType.CIVIL
    fallback_locale: str = "en"

    def tweak(self, **kwargs: Any) -> "CalendarConfig":
        return replace(self, **kwargs)


# ============================================================
# Results
# ============================================================

def _iso(d: Optional[date]) -> Optional[str]:
    return d.isoformat() if d is not None else None


@dataclass(frozen=True)
class ResolvedEntry:
    event_key: str
    name: str
    outcome: Outcome
    grade: Grade
    color: Tuple[Color, ...]
    jurisdiction: Jurisdiction
    season: LitSeason
    lectionary: LectionaryCategory
    readings_cycle: Optional[str] = None
    readings_type: ReadingsType = ReadingsType.FESTIVE
    transferred_from: Optional[date] = None  # set on transferred_to records
    transferred_to: Optional[date] = None    # set on transferred_from records
    reason: Optional[str] = None
    event: Optional[LiturgicalEvent] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_key": self.event_key,
            "name": self.name,
            "outcome": self.outcome.value,
            "grade": self.grade.name,
            "color": [c.value for c in self.color],
            "jurisdiction": str(self.jurisdiction),
            "season": self.season.value,
            "lectionary": self.lectionary.value,
            "readings_cycle": self.readings_cycle,
            "readings_type": self.readings_type.value,
            "transferred_from": _iso(self.transferred_from),
            "transferred_to": _iso(self.transferred_to),
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ResolvedDay:
    date: date
    entries: Tuple[ResolvedEntry, ...]
    attributes: Optional[Dict[str, Any]] = None

    @property
    def celebrated(self) -> Optional[ResolvedEntry]:
        """The day's celebration: a celebrated entry or a transfer landing here."""
        for e in self.entries:
            if e.outcome in (Outcome.CELEBRATED, Outcome.TRANSFERRED_TO):
                return e
        return None

    def with_outcome(self, outcome: Outcome) -> Tuple[ResolvedEntry, ...]:
        return tuple(e for e in self.entries if e.outcome == outcome)

    def get(self, event_key: str) -> Optional[ResolvedEntry]:
        for e in self.entries:
            if e.event_key == event_key:
                return e
        return None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "date": self.date.isoformat(),
            "entries": [e.to_dict() for e in self.entries],
        }
        if self.attributes is not None:
            out["attributes"] = dict(self.attributes)
        return out


@dataclass(frozen=True)
class CalendarYear:
    """Ordered mapping date -> ResolvedDay plus year metadata."""
    year: int
    year_type: YearType
    locale: str
    easter: date
    jurisdictions: Tuple[Jurisdiction, ...]
    sunday_cycle: str
    weekday_cycle: str
    days: Tuple[ResolvedDay, ...]
    _index: Dict[date, ResolvedDay] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {d.date: d for d in self.days})

    def __getitem__(self, d: date) -> ResolvedDay:
        return self._index[d]

    def __contains__(self, d: object) -> bool:
        return d in self._index

    def __iter__(self) -> Iterator[date]:
        return (d.date for d in self.days)

    def __len__(self) -> int:
        return len(self.days)

    def get(self, d: date) -> Optional[ResolvedDay]:
        return self._index.get(d)

    @property
    def start(self) -> date:
        return self.days[0].date

    @property
    def end(self) -> date:
        return self.days[-1].date

    def find(self, event_key: str) -> List[Tuple[date, ResolvedEntry]]:
        """All records of an event key, in date order."""
        out = []
        for day in self.days:
            for e in day.entries:
                if e.event_key == event_key:
                    out.append((day.date, e))
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "year_type": self.year_type.value,
            "locale": self.locale,
            "easter": self.easter.isoformat(),
            "jurisdictions": [str(j) for j in self.jurisdictions],
            "sunday_cycle": self.sunday_cycle,
            "weekday_cycle": self.weekday_cycle,
            "days": [d.to_dict() for d in self.days],
        }


@dataclass(frozen=True)
class DiagnosticEntry:
    kind: DiagnosticKind
    message: str
    event_key: Optional[str] = None
    jurisdiction: Optional[Jurisdiction] = None
    on: Optional[date] = None
    target: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "event_key": self.event_key,
            "jurisdiction": str(self.jurisdiction) if self.jurisdiction is not None else None,
            "date": _iso(self.on),
            "target": _iso(self.target),
        }


@dataclass(frozen=True)
class Diagnostics:
    entries: Tuple[DiagnosticEntry, ...] = ()

    def __iter__(self) -> Iterator[DiagnosticEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def of_kind(self, kind: DiagnosticKind) -> Tuple[DiagnosticEntry, ...]:
        return tuple(e for e in self.entries if e.kind == kind)

    @property
    def transfers(self) -> Tuple[DiagnosticEntry, ...]:
        return self.of_kind(DiagnosticKind.TRANSFER)

    @property
    def suppressions(self) -> Tuple[DiagnosticEntry, ...]:
        return self.of_kind(DiagnosticKind.SUPPRESSION)

    @property
    def unresolved(self) -> Tuple[DiagnosticEntry, ...]:
        return self.of_kind(DiagnosticKind.UNRESOLVED_TRANSFER)

    @property
    def locale_fallbacks(self) -> Tuple[DiagnosticEntry, ...]:
        return self.of_kind(DiagnosticKind.LOCALE_FALLBACK) + self.of_kind(DiagnosticKind.NAME_FALLBACK)

    def to_dict(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries]
