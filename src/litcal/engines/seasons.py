"""
litcal.engines.seasons
----------------------
Season boundaries, week numbering and date-rule expansion.

A rule either yields the date it falls on in a civil year, yields None when
it legitimately does not occur that year, or raises ConfigurationError when
it is malformed.
"""

from __future__ import annotations

import calendar as pycal
from datetime import date, timedelta
from typing import Dict, Optional, Tuple

from litcal.core.errors import ConfigurationError
from litcal.core.time import is_leap_year, is_sunday, sunday_on_or_before
from litcal.core.types import (
    AnchorOffset,
    DateRule,
    EasterOffset,
    FixedDate,
    LitSeason,
    SeasonDate,
    SeasonWeekday,
)
from litcal.engines.computus import ANCHOR_NAMES, LiturgicalAnchors, compute_anchors

# Inclusive week ranges accepted by SeasonWeekday rules.
# Christmas week 1 is the week after an Epiphany kept on Sunday.
WEEK_RANGES: Dict[LitSeason, Tuple[int, int]] = {
    LitSeason.ADVENT: (1, 4),
    LitSeason.CHRISTMAS: (1, 1),
    LitSeason.LENT: (1, 5),
    LitSeason.EASTER: (1, 7),
    LitSeason.ORDINARY_TIME: (1, 34),
}


# ============================================================
# Seasons
# ============================================================

def season_for_date(d: date, anchors: Optional[LiturgicalAnchors] = None) -> LitSeason:
    a = anchors if anchors is not None else compute_anchors(d.year)
    if d >= a.christmas or d <= a.baptism:
        return LitSeason.CHRISTMAS
    if d >= a.advent1:
        return LitSeason.ADVENT
    if a.ash_wednesday <= d < a.holy_thursday:
        return LitSeason.LENT
    if a.holy_thursday <= d < a.easter:
        return LitSeason.EASTER_TRIDUUM
    if a.easter <= d <= a.pentecost:
        return LitSeason.EASTER
    return LitSeason.ORDINARY_TIME


def ordinary_week(d: date, a: LiturgicalAnchors) -> Optional[int]:
    """Week of Ordinary Time containing d, or None outside Ordinary Time."""
    if a.baptism < d < a.ash_wednesday:
        base = sunday_on_or_before(a.baptism)
        return (d - base).days // 7 + 1
    if a.pentecost < d < a.advent1:
        return 34 - (a.christ_king - sunday_on_or_before(d)).days // 7
    return None


def season_week(d: date, anchors: Optional[LiturgicalAnchors] = None) -> Optional[int]:
    """
    Week number within the current season.

    Ash Wednesday and the days after it are week 0 of Lent; Holy Week is
    week 6. The Christmas season and the Triduum have no week numbering.
    """
    a = anchors if anchors is not None else compute_anchors(d.year)
    season = season_for_date(d, a)
    if season == LitSeason.ADVENT:
        return (d - a.advent1).days // 7 + 1
    if season == LitSeason.LENT:
        if d < a.lent1:
            return 0
        return (d - a.lent1).days // 7 + 1
    if season == LitSeason.EASTER:
        return (d - a.easter).days // 7 + 1
    if season == LitSeason.ORDINARY_TIME:
        return ordinary_week(d, a)
    return None


def is_privileged_weekday(d: date, anchors: Optional[LiturgicalAnchors] = None) -> bool:
    """Weekdays Dec 17-24, the Christmas octave and Lent."""
    if is_sunday(d):
        return False
    a = anchors if anchors is not None else compute_anchors(d.year)
    if d.month == 12 and 17 <= d.day <= 31 and d != a.christmas:
        return True
    return a.ash_wednesday < d < a.palm_sunday


# ============================================================
# Date rules
# ============================================================

def _check_weekday(weekday: int) -> None:
    if not (0 <= weekday <= 6):
        raise ConfigurationError(f"weekday must be 0..6 (0=Sunday), got {weekday}")


def _fixed(rule: FixedDate, year: int) -> Optional[date]:
    if not (1 <= rule.month <= 12):
        raise ConfigurationError(f"Invalid month {rule.month} in {rule}")
    # Validated against a leap year so Feb 29 is accepted and skipped in common years
    if not (1 <= rule.day <= pycal.monthrange(2000, rule.month)[1]):
        raise ConfigurationError(f"Invalid day {rule.day} for month {rule.month} in {rule}")
    if rule.month == 2 and rule.day == 29 and not is_leap_year(year):
        return None
    return date(year, rule.month, rule.day)


def _season_weekday(rule: SeasonWeekday, a: LiturgicalAnchors) -> Optional[date]:
    if rule.season not in WEEK_RANGES:
        raise ConfigurationError(f"Season {rule.season.value} has no week numbering")
    lo, hi = WEEK_RANGES[rule.season]
    if not (lo <= rule.week <= hi):
        raise ConfigurationError(f"Week {rule.week} outside {lo}..{hi} for {rule.season.value}")
    _check_weekday(rule.weekday)

    if rule.season == LitSeason.CHRISTMAS:
        if rule.weekday == 0:
            raise ConfigurationError(f"The Sunday of {rule} is Epiphany itself")
        if not a.epiphany_on_sunday:
            return None
        d = a.epiphany + timedelta(days=rule.weekday)
        return d if d < a.baptism else None

    offset = timedelta(days=7 * (rule.week - 1) + rule.weekday)
    if rule.season == LitSeason.ADVENT:
        d = a.advent1 + offset
        # Dec 17-24 weekdays are dated rather than numbered
        if rule.weekday != 0 and d.day >= 17 and d.month == 12:
            return None
        return d if d < a.christmas else None

    if rule.season == LitSeason.LENT:
        d = a.lent1 + offset
        return d if d < a.palm_sunday else None

    if rule.season == LitSeason.EASTER:
        d = a.easter + offset
        return d if d <= a.pentecost else None

    # Ordinary Time: the weeks before Lent, then counting back from Christ the King
    d1 = sunday_on_or_before(a.baptism) + offset
    if a.baptism < d1 < a.ash_wednesday:
        return d1
    d2 = a.christ_king - timedelta(days=7 * (34 - rule.week)) + timedelta(days=rule.weekday)
    if a.pentecost < d2 < a.advent1:
        if rule.weekday == 0 and d2 in (a.trinity, a.christ_king):
            return None
        return d2
    return None


def _season_date(rule: SeasonDate, year: int, a: LiturgicalAnchors) -> Optional[date]:
    d = _fixed(FixedDate(rule.month, rule.day), year)
    if d is None or is_sunday(d):
        return None
    if rule.season == LitSeason.ADVENT:
        if rule.month != 12 or not (17 <= rule.day <= 24):
            raise ConfigurationError(f"Advent dated weekdays run Dec 17-24, got {rule}")
        return d
    if rule.season == LitSeason.CHRISTMAS:
        if rule.month == 12:
            if rule.day <= 25:
                raise ConfigurationError(f"Christmas dated weekdays start Dec 26, got {rule}")
            return d
        if rule.month == 1:
            if rule.after_epiphany:
                if a.epiphany_on_sunday:
                    return None
                return d if a.epiphany < d < a.baptism else None
            return d if a.mary_mother_of_god < d < a.epiphany else None
        raise ConfigurationError(f"Christmas dated weekdays fall in December or January, got {rule}")
    raise ConfigurationError(f"Season {rule.season.value} has no dated weekdays")


def resolve_rule(rule: DateRule, year: int, anchors: Optional[LiturgicalAnchors] = None) -> Optional[date]:
    """Date the rule falls on in the civil year, or None if it does not occur."""
    a = anchors if anchors is not None else compute_anchors(year)

    if isinstance(rule, FixedDate):
        return _fixed(rule, year)

    if isinstance(rule, EasterOffset):
        if rule.days is None:
            raise ConfigurationError("Moveable rule relative to Easter has no offset")
        return a.easter + timedelta(days=rule.days)

    if isinstance(rule, AnchorOffset):
        if rule.anchor not in ANCHOR_NAMES:
            raise ConfigurationError(f"Unknown anchor '{rule.anchor}'. Available: {sorted(ANCHOR_NAMES)}")
        if rule.days is None:
            raise ConfigurationError(f"Moveable rule relative to '{rule.anchor}' has no offset")
        base = a.get(rule.anchor)
        if base is None:
            return None
        return base + timedelta(days=rule.days)

    if isinstance(rule, SeasonWeekday):
        return _season_weekday(rule, a)

    if isinstance(rule, SeasonDate):
        return _season_date(rule, year, a)

    raise TypeError(f"Unknown date rule type: {type(rule)}")

