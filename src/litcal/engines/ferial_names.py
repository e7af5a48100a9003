"""
litcal.engines.ferial_names
---------------------------
Display names for procedurally named events (ferial weekdays, numbered
Sundays, octave days).

An event key is parsed into exactly one of a closed set of key shapes by
anchored, whole-key matching; a key that matches no shape (or names a week
outside its season) is simply not a ferial key and yields None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Pattern, Tuple, Union

from litcal.core.types import LitSeason
from litcal.engines.locale import (
    ENGLISH_WEEKDAYS,
    FALLBACK_LANGUAGE,
    LATIN_ORDINALS_DAY,
    LocaleContext,
    to_roman,
)

SHORT_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_WEEKDAY_PREFIX = {
    LitSeason.ADVENT: "AdventWeekday",
    LitSeason.LENT: "LentWeekday",
    LitSeason.EASTER: "EasterWeekday",
    LitSeason.ORDINARY_TIME: "OrdWeekday",
}
_SUNDAY_PREFIX = {
    LitSeason.ADVENT: "Advent",
    LitSeason.LENT: "Lent",
    LitSeason.EASTER: "Easter",
    LitSeason.ORDINARY_TIME: "OrdSunday",
}
_WEEKDAY_WEEKS = {
    LitSeason.ADVENT: (1, 4),
    LitSeason.LENT: (1, 5),
    LitSeason.EASTER: (2, 7),
    LitSeason.ORDINARY_TIME: (1, 34),
}
_SUNDAY_WEEKS = {
    LitSeason.ADVENT: (1, 4),
    LitSeason.LENT: (1, 5),
    LitSeason.EASTER: (2, 7),
    LitSeason.ORDINARY_TIME: (2, 33),
}


# ============================================================
# Key shapes
# ============================================================

@dataclass(frozen=True)
class SeasonWeekdayKey:
    season: LitSeason
    week: int
    weekday: int

    @property
    def event_key(self) -> str:
        return f"{_WEEKDAY_PREFIX[self.season]}{self.week}{ENGLISH_WEEKDAYS[self.weekday]}"


@dataclass(frozen=True)
class SeasonSundayKey:
    season: LitSeason
    week: int

    @property
    def event_key(self) -> str:
        return f"{_SUNDAY_PREFIX[self.season]}{self.week}"


@dataclass(frozen=True)
class SeasonDateKey:
    season: LitSeason
    month: int
    day: int
    after_epiphany: bool = False

    @property
    def event_key(self) -> str:
        if self.season == LitSeason.ADVENT:
            return f"AdventWeekdayDec{self.day}"
        if self.after_epiphany:
            return f"DayAfterEpiphanyJan{self.day}"
        return f"ChristmasWeekdayJan{self.day}"


@dataclass(frozen=True)
class OctaveDayKey:
    octave: LitSeason  # CHRISTMAS or EASTER
    day: int           # day of the octave, 2..7

    @property
    def event_key(self) -> str:
        if self.octave == LitSeason.CHRISTMAS:
            return f"ChristmasWeekdayDec{self.day + 24}"
        return f"{SHORT_WEEKDAYS[self.day - 1]}OctaveEaster"


@dataclass(frozen=True)
class DayAfterKey:
    anchor: str  # "Epiphany" or "AshWednesday"
    weekday: int

    @property
    def event_key(self) -> str:
        if self.anchor == "Epiphany":
            return f"DayAfterEpiphany{ENGLISH_WEEKDAYS[self.weekday]}"
        return f"{ENGLISH_WEEKDAYS[self.weekday]}AfterAshWednesday"


@dataclass(frozen=True)
class HolyWeekKey:
    weekday: int

    @property
    def event_key(self) -> str:
        return f"{SHORT_WEEKDAYS[self.weekday]}HolyWeek"


FerialKey = Union[SeasonWeekdayKey, SeasonSundayKey, SeasonDateKey, OctaveDayKey, DayAfterKey, HolyWeekKey]


# ============================================================
# Parsing
# ============================================================

_DAY = "(Sunday|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday)"
_SEASON_BY_PREFIX = {"Advent": LitSeason.ADVENT, "Lent": LitSeason.LENT, "Easter": LitSeason.EASTER, "Ord": LitSeason.ORDINARY_TIME}


def _in(value: int, bounds: Tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def _season_weekday(m: re.Match) -> Optional[FerialKey]:
    season = _SEASON_BY_PREFIX[m.group(1)]
    week, weekday = int(m.group(2)), ENGLISH_WEEKDAYS.index(m.group(3))
    if weekday == 0 or not _in(week, _WEEKDAY_WEEKS[season]):
        return None
    return SeasonWeekdayKey(season, week, weekday)


def _season_sunday(m: re.Match) -> Optional[FerialKey]:
    season = _SEASON_BY_PREFIX[m.group(1)]
    week = int(m.group(2))
    return SeasonSundayKey(season, week) if _in(week, _SUNDAY_WEEKS[season]) else None


def _advent_date(m: re.Match) -> Optional[FerialKey]:
    day = int(m.group(1))
    return SeasonDateKey(LitSeason.ADVENT, 12, day) if 17 <= day <= 24 else None


def _christmas_octave(m: re.Match) -> Optional[FerialKey]:
    day = int(m.group(1))
    return OctaveDayKey(LitSeason.CHRISTMAS, day - 24) if 26 <= day <= 31 else None


def _christmas_jan(m: re.Match) -> Optional[FerialKey]:
    day = int(m.group(1))
    return SeasonDateKey(LitSeason.CHRISTMAS, 1, day) if 2 <= day <= 8 else None


def _after_epiphany_jan(m: re.Match) -> Optional[FerialKey]:
    day = int(m.group(1))
    return SeasonDateKey(LitSeason.CHRISTMAS, 1, day, after_epiphany=True) if 7 <= day <= 13 else None


def _after_epiphany(m: re.Match) -> Optional[FerialKey]:
    weekday = ENGLISH_WEEKDAYS.index(m.group(1))
    return DayAfterKey("Epiphany", weekday) if weekday != 0 else None


def _after_ash_wednesday(m: re.Match) -> Optional[FerialKey]:
    return DayAfterKey("AshWednesday", ENGLISH_WEEKDAYS.index(m.group(1)))


def _easter_octave(m: re.Match) -> Optional[FerialKey]:
    return OctaveDayKey(LitSeason.EASTER, SHORT_WEEKDAYS.index(m.group(1)) + 1)


def _holy_week(m: re.Match) -> Optional[FerialKey]:
    return HolyWeekKey(SHORT_WEEKDAYS.index(m.group(1)))


_PATTERNS: List[Tuple[Pattern[str], Callable[[re.Match], Optional[FerialKey]]]] = [
    (re.compile(rf"(Advent|Lent|Easter|Ord)Weekday(\d+){_DAY}"), _season_weekday),
    (re.compile(r"(Advent|Lent|Easter)(\d+)"), _season_sunday),
    (re.compile(r"(Ord)Sunday(\d+)"), _season_sunday),
    (re.compile(r"AdventWeekdayDec(\d+)"), _advent_date),
    (re.compile(r"ChristmasWeekdayDec(\d+)"), _christmas_octave),
    (re.compile(r"ChristmasWeekdayJan(\d+)"), _christmas_jan),
    (re.compile(r"DayAfterEpiphanyJan(\d+)"), _after_epiphany_jan),
    (re.compile(rf"DayAfterEpiphany{_DAY}"), _after_epiphany),
    (re.compile(r"(Thursday|Friday|Saturday)AfterAshWednesday"), _after_ash_wednesday),
    (re.compile(r"(Mon|Tue|Wed|Thu|Fri|Sat)OctaveEaster"), _easter_octave),
    (re.compile(r"(Mon|Tue|Wed)HolyWeek"), _holy_week),
]


def parse_event_key(event_key: str) -> Optional[FerialKey]:
    """Key shape of a ferial event key, or None if the key is not ferial."""
    for pattern, build in _PATTERNS:
        m = pattern.fullmatch(event_key)
        if m is None:
            continue
        shape = build(m)
        # "Advent01" and friends are not canonical keys
        if shape is None or shape.event_key != event_key:
            return None
        return shape
    return None


_PATTERN_NAMES = {
    SeasonWeekdayKey: "season_weekday",
    SeasonSundayKey: "season_sunday",
    SeasonDateKey: "season_date",
    OctaveDayKey: "octave_day",
    DayAfterKey: "day_after",
    HolyWeekKey: "holy_week",
}


def key_pattern(event_key: str) -> Optional[str]:
    """Name of the key shape ("season_weekday", "octave_day", ...) or None."""
    shape = parse_event_key(event_key)
    return None if shape is None else _PATTERN_NAMES[type(shape)]


# ============================================================
# Phrase templates
# ============================================================

TEMPLATES: Dict[str, Dict[str, str]] = {
    "en": {
        "weekday_ADVENT": "{weekday} of the {ordinal} Week of Advent",
        "weekday_LENT": "{weekday} of the {ordinal} Week of Lent",
        "weekday_EASTER": "{weekday} of the {ordinal} Week of Easter",
        "weekday_ORDINARY_TIME": "{weekday} of the {ordinal} Week of Ordinary Time",
        "sunday_ADVENT": "{ordinal} Sunday of Advent",
        "sunday_LENT": "{ordinal} Sunday of Lent",
        "sunday_EASTER": "{ordinal} Sunday of Easter",
        "sunday_ORDINARY_TIME": "{ordinal} Sunday of Ordinary Time",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "{ordinal} Day of the Octave of Christmas",
        "octave_EASTER": "{weekday} within the Octave of Easter",
        "after_Epiphany": "{weekday} after Epiphany",
        "after_AshWednesday": "{weekday} after Ash Wednesday",
        "holy_week": "{weekday} of Holy Week",
        "season_ADVENT": "Advent",
        "season_CHRISTMAS": "Christmas",
        "season_LENT": "Lent",
        "season_EASTER_TRIDUUM": "Easter Triduum",
        "season_EASTER": "Easter",
        "season_ORDINARY_TIME": "Ordinary Time",
    },
    "la": {
        "weekday_ADVENT": "{weekday} Hebdomadæ {ordinal} Adventus",
        "weekday_LENT": "{weekday} Hebdomadæ {ordinal} Quadragesimæ",
        "weekday_EASTER": "{weekday} Hebdomadæ {ordinal} Temporis Paschalis",
        "weekday_ORDINARY_TIME": "{weekday} Hebdomadæ {ordinal} Temporis per annum",
        "sunday_ADVENT": "Dominica {roman} Adventus",
        "sunday_LENT": "Dominica {roman} Quadragesimæ",
        "sunday_EASTER": "Dominica {roman} Paschæ",
        "sunday_ORDINARY_TIME": "Dominica {roman} per annum",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "Dies {ordinal} infra Octavam Nativitatis",
        "octave_EASTER": "{weekday} infra Octavam Paschæ",
        "after_Epiphany": "{weekday} post Epiphaniam",
        "after_AshWednesday": "{weekday} post Feria IV Cinerum",
        "holy_week": "{weekday} Hebdomadæ Sanctæ",
        "season_ADVENT": "Tempus Adventus",
        "season_CHRISTMAS": "Tempus Nativitatis",
        "season_LENT": "Tempus Quadragesimæ",
        "season_EASTER_TRIDUUM": "Triduum Paschale",
        "season_EASTER": "Tempus Paschale",
        "season_ORDINARY_TIME": "Tempus per annum",
    },
    "it": {
        "weekday_ADVENT": "{weekday} della {ordinal} settimana di Avvento",
        "weekday_LENT": "{weekday} della {ordinal} settimana di Quaresima",
        "weekday_EASTER": "{weekday} della {ordinal} settimana di Pasqua",
        "weekday_ORDINARY_TIME": "{weekday} della {ordinal} settimana del Tempo Ordinario",
        "sunday_ADVENT": "{ordinal} Domenica di Avvento",
        "sunday_LENT": "{ordinal} Domenica di Quaresima",
        "sunday_EASTER": "{ordinal} Domenica di Pasqua",
        "sunday_ORDINARY_TIME": "{ordinal} Domenica del Tempo Ordinario",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "Feria propria del {date}",
        "octave_CHRISTMAS": "{ordinal} giorno fra l'Ottava di Natale",
        "octave_EASTER": "{weekday} fra l'Ottava di Pasqua",
        "after_Epiphany": "{weekday} dopo l'Epifania",
        "after_AshWednesday": "{weekday} dopo le Ceneri",
        "holy_week": "{weekday} della Settimana Santa",
        "season_ADVENT": "Avvento",
        "season_CHRISTMAS": "Tempo di Natale",
        "season_LENT": "Quaresima",
        "season_EASTER_TRIDUUM": "Triduo Pasquale",
        "season_EASTER": "Tempo di Pasqua",
        "season_ORDINARY_TIME": "Tempo Ordinario",
    },
    "es": {
        "weekday_ADVENT": "{weekday} de la {ordinal} semana de Adviento",
        "weekday_LENT": "{weekday} de la {ordinal} semana de Cuaresma",
        "weekday_EASTER": "{weekday} de la {ordinal} semana de Pascua",
        "weekday_ORDINARY_TIME": "{weekday} de la {ordinal} semana del Tiempo Ordinario",
        "sunday_ADVENT": "{ordinal} Domingo de Adviento",
        "sunday_LENT": "{ordinal} Domingo de Cuaresma",
        "sunday_EASTER": "{ordinal} Domingo de Pascua",
        "sunday_ORDINARY_TIME": "{ordinal} Domingo del Tiempo Ordinario",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "{ordinal} día de la Octava de Navidad",
        "octave_EASTER": "{weekday} de la Octava de Pascua",
        "after_Epiphany": "{weekday} después de Epifanía",
        "after_AshWednesday": "{weekday} después de Ceniza",
        "holy_week": "{weekday} Santo",
        "season_ADVENT": "Adviento",
        "season_CHRISTMAS": "Navidad",
        "season_LENT": "Cuaresma",
        "season_EASTER_TRIDUUM": "Triduo Pascual",
        "season_EASTER": "Pascua",
        "season_ORDINARY_TIME": "Tiempo Ordinario",
    },
    "fr": {
        "weekday_ADVENT": "{weekday} de la {ordinal} semaine de l'Avent",
        "weekday_LENT": "{weekday} de la {ordinal} semaine de Carême",
        "weekday_EASTER": "{weekday} de la {ordinal} semaine de Pâques",
        "weekday_ORDINARY_TIME": "{weekday} de la {ordinal} semaine du Temps Ordinaire",
        "sunday_ADVENT": "{ordinal} dimanche de l'Avent",
        "sunday_LENT": "{ordinal} dimanche de Carême",
        "sunday_EASTER": "{ordinal} dimanche de Pâques",
        "sunday_ORDINARY_TIME": "{ordinal} dimanche du Temps Ordinaire",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "{ordinal} jour dans l'Octave de Noël",
        "octave_EASTER": "{weekday} dans l'Octave de Pâques",
        "after_Epiphany": "{weekday} après l'Épiphanie",
        "after_AshWednesday": "{weekday} après les Cendres",
        "holy_week": "{weekday} Saint",
        "season_ADVENT": "Avent",
        "season_CHRISTMAS": "Temps de Noël",
        "season_LENT": "Carême",
        "season_EASTER_TRIDUUM": "Triduum pascal",
        "season_EASTER": "Temps pascal",
        "season_ORDINARY_TIME": "Temps Ordinaire",
    },
    "de": {
        "weekday_ADVENT": "{weekday} der {ordinal} Adventswoche",
        "weekday_LENT": "{weekday} der {ordinal} Fastenwoche",
        "weekday_EASTER": "{weekday} der {ordinal} Osterwoche",
        "weekday_ORDINARY_TIME": "{weekday} der {ordinal} Woche im Jahreskreis",
        "sunday_ADVENT": "{ordinal} Adventssonntag",
        "sunday_LENT": "{ordinal} Fastensonntag",
        "sunday_EASTER": "{ordinal} Sonntag der Osterzeit",
        "sunday_ORDINARY_TIME": "{ordinal} Sonntag im Jahreskreis",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "{ordinal} Tag der Weihnachtsoktav",
        "octave_EASTER": "{weekday} der Osteroktav",
        "after_Epiphany": "{weekday} nach Erscheinung des Herrn",
        "after_AshWednesday": "{weekday} nach Aschermittwoch",
        "holy_week": "{weekday} der Karwoche",
        "season_ADVENT": "Advent",
        "season_CHRISTMAS": "Weihnachtszeit",
        "season_LENT": "Fastenzeit",
        "season_EASTER_TRIDUUM": "Österliches Triduum",
        "season_EASTER": "Osterzeit",
        "season_ORDINARY_TIME": "Jahreskreis",
    },
    "pt": {
        "weekday_ADVENT": "{weekday} da {ordinal} Semana do Advento",
        "weekday_LENT": "{weekday} da {ordinal} Semana da Quaresma",
        "weekday_EASTER": "{weekday} da {ordinal} Semana da Páscoa",
        "weekday_ORDINARY_TIME": "{weekday} da {ordinal} Semana do Tempo Comum",
        "sunday_ADVENT": "{ordinal} Domingo do Advento",
        "sunday_LENT": "{ordinal} Domingo da Quaresma",
        "sunday_EASTER": "{ordinal} Domingo da Páscoa",
        "sunday_ORDINARY_TIME": "{ordinal} Domingo do Tempo Comum",
        "dated_ADVENT": "{date}",
        "dated_CHRISTMAS": "{date}",
        "octave_CHRISTMAS": "{ordinal} dia da Oitava do Natal",
        "octave_EASTER": "{weekday} da Oitava da Páscoa",
        "after_Epiphany": "{weekday} depois da Epifania",
        "after_AshWednesday": "{weekday} depois das Cinzas",
        "holy_week": "{weekday} da Semana Santa",
        "season_ADVENT": "Advento",
        "season_CHRISTMAS": "Tempo do Natal",
        "season_LENT": "Quaresma",
        "season_EASTER_TRIDUUM": "Tríduo Pascal",
        "season_EASTER": "Tempo da Páscoa",
        "season_ORDINARY_TIME": "Tempo Comum",
    },
}


# ============================================================
# Generator
# ============================================================

class FerialNameGenerator:
    """
    Renders ferial key shapes for one request locale.

    Templates are looked up along the context's fallback chain. If only the
    English templates apply, weekday and ordinal formatting switch to
    English as well so a name never mixes two languages.
    """

    def __init__(self, ctx: LocaleContext):
        for tag in ctx.chain:
            if tag in TEMPLATES:
                lang = tag
                break
        else:
            lang = FALLBACK_LANGUAGE

        if lang.split("_")[0] != ctx.language:
            ctx = LocaleContext.create(lang)
            self.degraded = True
        else:
            self.degraded = ctx.degraded
        self.ctx = ctx
        self.language = lang
        self.templates = TEMPLATES[lang]

    @classmethod
    def for_locale(cls, locale: str) -> "FerialNameGenerator":
        return cls(LocaleContext.create(locale))

    def generate(self, event_key: str) -> Optional[str]:
        shape = parse_event_key(event_key)
        if shape is None:
            return None
        return self.render(shape)

    def render(self, shape: FerialKey) -> str:
        ctx = self.ctx
        if isinstance(shape, SeasonWeekdayKey):
            return self._fmt(
                f"weekday_{shape.season.name}",
                weekday=ctx.weekday_name(shape.weekday),
                ordinal=ctx.ordinal(shape.week),
            )
        if isinstance(shape, SeasonSundayKey):
            return self._fmt(f"sunday_{shape.season.name}", ordinal=ctx.ordinal(shape.week), roman=to_roman(shape.week))
        if isinstance(shape, SeasonDateKey):
            return self._fmt(f"dated_{shape.season.name}", date=ctx.month_day(shape.month, shape.day))
        if isinstance(shape, OctaveDayKey):
            if shape.octave == LitSeason.CHRISTMAS:
                ordinal = LATIN_ORDINALS_DAY[shape.day] if ctx.is_latin else ctx.ordinal(shape.day)
                return self._fmt("octave_CHRISTMAS", ordinal=ordinal)
            return self._fmt("octave_EASTER", weekday=ctx.weekday_name(shape.day - 1))
        if isinstance(shape, DayAfterKey):
            return self._fmt(f"after_{shape.anchor}", weekday=ctx.weekday_name(shape.weekday))
        if isinstance(shape, HolyWeekKey):
            return self._fmt("holy_week", weekday=ctx.weekday_name(shape.weekday))
        raise TypeError(f"Unknown key shape: {type(shape)}")

    def season(self, season: LitSeason) -> str:
        return self.templates[f"season_{season.name}"]

    def _fmt(self, template: str, **kwargs: str) -> str:
        return self.templates[template].format(**kwargs)


def generate_name(event_key: str, locale: str = FALLBACK_LANGUAGE) -> Optional[str]:
    return FerialNameGenerator.for_locale(locale).generate(event_key)


def season_name(season: LitSeason, ctx: LocaleContext) -> str:
    """'Ordinary Time', 'Tempus per annum'; English when the language has no table."""
    return FerialNameGenerator(ctx).season(season)
