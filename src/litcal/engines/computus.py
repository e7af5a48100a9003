"""
litcal.engines.computus
-----------------------
Gregorian computus and the anchor dates of the liturgical year.

Every moveable date of a civil year is an offset from either Easter Sunday
or Christmas Day; this module derives both families once per year.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date, timedelta
from functools import lru_cache
from typing import Dict, Optional, Tuple

from litcal.core.time import dow, is_sunday, sunday_after


def easter_month_day(year: int) -> Tuple[int, int]:
    """
    Anonymous Gregorian algorithm (Meeus/Jones/Butcher).

    Floor division keeps this total over all integers; representing the
    result as a `date` is the caller's concern.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return month, day


def compute_easter(year: int) -> date:
    month, day = easter_month_day(year)
    return date(year, month, day)


def advent_start(year: int) -> date:
    """First Sunday of Advent: the fourth Sunday before Christmas (Nov 27 - Dec 3)."""
    christmas = date(year, 12, 25)
    back = dow(christmas) or 7
    return christmas - timedelta(days=back + 21)


@dataclass(frozen=True)
class LiturgicalAnchors:
    year: int
    easter: date
    ash_wednesday: date
    lent1: date
    palm_sunday: date
    holy_thursday: date
    good_friday: date
    easter_vigil: date
    ascension: date
    pentecost: date
    trinity: date
    corpus_christi: date
    sacred_heart: date
    immaculate_heart: date
    mary_mother_of_god: date
    epiphany: date
    epiphany_sunday: date
    baptism: date
    baptism_after_epiphany_sunday: date
    christmas2: Optional[date]
    christ_king: date
    advent1: date
    christmas: date
    holy_family: date
    epiphany_on_sunday: bool = False

    def get(self, name: str) -> Optional[date]:
        if name not in ANCHOR_NAMES:
            raise KeyError(f"Unknown anchor '{name}'. Available: {sorted(ANCHOR_NAMES)}")
        return getattr(self, name)

    def as_dict(self) -> Dict[str, Optional[date]]:
        return {n: getattr(self, n) for n in ANCHOR_NAMES}

    def with_epiphany_on_sunday(self) -> "LiturgicalAnchors":
        """Anchors where Epiphany is kept on the Sunday between Jan 2 and Jan 8."""
        return replace(
            self,
            epiphany=self.epiphany_sunday,
            baptism=self.baptism_after_epiphany_sunday,
            christmas2=None,
            epiphany_on_sunday=True,
        )


ANCHOR_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(LiturgicalAnchors) if f.name not in ("year", "epiphany_on_sunday"))


@lru_cache(maxsize=256)
def compute_anchors(year: int) -> LiturgicalAnchors:
    easter = compute_easter(year)

    def e(days: int) -> date:
        return easter + timedelta(days=days)

    epiphany = date(year, 1, 6)
    # Sunday between Jan 2 and Jan 8 where Epiphany is not a holy day of obligation
    epiphany_sunday = date(year, 1, 2) + timedelta(days=(7 - dow(date(year, 1, 2))) % 7)
    baptism = sunday_after(epiphany)
    if epiphany_sunday.day >= 7:
        baptism_alt = epiphany_sunday + timedelta(days=1)
    else:
        baptism_alt = sunday_after(epiphany_sunday)

    christmas2 = None
    for day in range(2, 6):
        if is_sunday(date(year, 1, day)):
            christmas2 = date(year, 1, day)

    christmas = date(year, 12, 25)
    holy_family = date(year, 12, 30) if is_sunday(christmas) else sunday_after(christmas)
    advent1 = advent_start(year)

    return LiturgicalAnchors(
        year=year,
        easter=easter,
        ash_wednesday=e(-46),
        lent1=e(-42),
        palm_sunday=e(-7),
        holy_thursday=e(-3),
        good_friday=e(-2),
        easter_vigil=e(-1),
        ascension=e(39),
        pentecost=e(49),
        trinity=e(56),
        corpus_christi=e(60),
        sacred_heart=e(68),
        immaculate_heart=e(69),
        mary_mother_of_god=date(year, 1, 1),
        epiphany=epiphany,
        epiphany_sunday=epiphany_sunday,
        baptism=baptism,
        baptism_after_epiphany_sunday=baptism_alt,
        christmas2=christmas2,
        christ_king=advent1 - timedelta(days=7),
        advent1=advent1,
        christmas=christmas,
        holy_family=holy_family,
    )
