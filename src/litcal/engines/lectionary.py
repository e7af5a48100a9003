"""
litcal.engines.lectionary
-------------------------
Lectionary category and readings cycle of resolved events.

Sundays and solemnities follow the three-year cycle (A/B/C) keyed to the
liturgical year, which begins on the first Sunday of Advent; Ordinary Time
weekdays follow the two-year cycle (I/II). Everything else has a single
flat set of readings.

Independently of the cycle, readings_type gives the shape of an event's
readings: a few celebrations have several Masses or a vigil, weekdays of
the seasons have ferial readings, everything else has festive ones.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from litcal.core.types import LectionaryCategory, LitSeason, LiturgicalEvent, ReadingsType
from litcal.engines.computus import compute_anchors
from litcal.engines.ferial_names import (
    DayAfterKey,
    HolyWeekKey,
    OctaveDayKey,
    SeasonDateKey,
    SeasonSundayKey,
    SeasonWeekdayKey,
    parse_event_key,
)

# Temporale events whose readings are proper rather than cycled
_LENT_PROPER = frozenset({"AshWednesday"})
_SANCTORUM_PROPER = frozenset({"ImmaculateHeart"})

_PROPER_READINGS = {
    "Christmas": ReadingsType.CHRISTMAS,
    "Pentecost": ReadingsType.FESTIVE_WITH_VIGIL,
    "EasterVigil": ReadingsType.EASTER_VIGIL,
    "PalmSun": ReadingsType.PALM_SUNDAY,
    "Easter": ReadingsType.WITH_EVENING,
    "AllSouls": ReadingsType.MULTIPLE_SCHEMAS,
}

_WEEKDAY_BY_SEASON = {
    LitSeason.ADVENT: LectionaryCategory.WEEKDAYS_ADVENT,
    LitSeason.CHRISTMAS: LectionaryCategory.WEEKDAYS_CHRISTMAS,
    LitSeason.LENT: LectionaryCategory.WEEKDAYS_LENT,
    LitSeason.EASTER: LectionaryCategory.WEEKDAYS_EASTER,
    LitSeason.ORDINARY_TIME: LectionaryCategory.WEEKDAYS_ORDINARY,
}


def lectionary_category(event: LiturgicalEvent) -> LectionaryCategory:
    key = event.event_key
    if key in _SANCTORUM_PROPER:
        return LectionaryCategory.SANCTORUM
    if key in _LENT_PROPER:
        return LectionaryCategory.WEEKDAYS_LENT

    shape = parse_event_key(key)
    if isinstance(shape, SeasonSundayKey):
        return LectionaryCategory.SUNDAYS_SOLEMNITIES
    if isinstance(shape, SeasonWeekdayKey):
        return _WEEKDAY_BY_SEASON[shape.season]
    if isinstance(shape, SeasonDateKey):
        return _WEEKDAY_BY_SEASON[shape.season]
    if isinstance(shape, OctaveDayKey):
        return _WEEKDAY_BY_SEASON[shape.octave]
    if isinstance(shape, HolyWeekKey):
        return LectionaryCategory.WEEKDAYS_LENT
    if isinstance(shape, DayAfterKey):
        if shape.anchor == "AshWednesday":
            return LectionaryCategory.WEEKDAYS_LENT
        return LectionaryCategory.WEEKDAYS_CHRISTMAS

    if event.temporale:
        return LectionaryCategory.SUNDAYS_SOLEMNITIES
    return LectionaryCategory.SANCTORUM


def readings_type(event: LiturgicalEvent) -> ReadingsType:
    if event.readings is not None:
        return event.readings
    proper = _PROPER_READINGS.get(event.event_key)
    if proper is not None:
        return proper
    shape = parse_event_key(event.event_key)
    if isinstance(shape, (SeasonWeekdayKey, SeasonDateKey, DayAfterKey)):
        return ReadingsType.FERIAL
    # Christmas octave weekdays are ferial; the Easter octave days are not
    if isinstance(shape, OctaveDayKey) and shape.octave == LitSeason.CHRISTMAS:
        return ReadingsType.FERIAL
    return ReadingsType.FESTIVE


def liturgical_year_of(d: date) -> int:
    """Liturgical year containing d; it is named after the civil year it ends in."""
    return d.year + 1 if d >= compute_anchors(d.year).advent1 else d.year


def sunday_cycle(liturgical_year: int) -> str:
    return "ABC"[(liturgical_year - 1) % 3]


def weekday_cycle(liturgical_year: int) -> str:
    return "I" if liturgical_year % 2 else "II"


def readings_cycle(category: LectionaryCategory, d: date) -> Optional[str]:
    if not category.has_year_cycle:
        return None
    ly = liturgical_year_of(d)
    if category == LectionaryCategory.SUNDAYS_SOLEMNITIES:
        return sunday_cycle(ly)
    return weekday_cycle(ly)
