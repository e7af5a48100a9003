"""
litcal.engines.locale
---------------------
Per-request locale context for name formatting.

Resolution walks a three-tier chain: the exact regional tag ("pt_BR"), its
base language ("pt"), then English. Latin is not covered by CLDR and is
served from fixed tables. Nothing here raises on an unknown or partially
supported locale; the context records that it degraded instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_skeleton
from num2words import num2words

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

# 2024-01-07 is a Sunday; weekday names are read off the week that follows
_REFERENCE_SUNDAY = date(2024, 1, 7)

ENGLISH_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

LATIN_WEEKDAYS = ("Dominica", "Feria II", "Feria III", "Feria IV", "Feria V", "Feria VI", "Sabbato")

LATIN_MONTHS_GENITIVE = (
    "Ianuarii", "Februarii", "Martii", "Aprilis", "Maii", "Iunii",
    "Iulii", "Augusti", "Septembris", "Octobris", "Novembris", "Decembris",
)

# Feminine genitive ordinals ("Hebdomadæ Primæ ...")
_LATIN_UNITS_GENITIVE = ("", "Primæ", "Secundæ", "Tertiæ", "Quartæ", "Quintæ", "Sextæ", "Septimæ", "Octavæ", "Nonæ")
LATIN_ORDINALS_GENITIVE = {
    **{n: _LATIN_UNITS_GENITIVE[n] for n in range(1, 10)},
    10: "Decimæ",
    11: "Undecimæ",
    12: "Duodecimæ",
    **{10 + n: f"Decimæ {_LATIN_UNITS_GENITIVE[n]}" for n in range(3, 10)},
    20: "Vigesimæ",
    **{20 + n: f"Vigesimæ {_LATIN_UNITS_GENITIVE[n]}" for n in range(1, 10)},
    30: "Trigesimæ",
    **{30 + n: f"Trigesimæ {_LATIN_UNITS_GENITIVE[n]}" for n in range(1, 5)},
}

# Days of an octave ("Dies Secunda infra Octavam ...")
LATIN_ORDINALS_DAY = {
    1: "Prima", 2: "Secunda", 3: "Tertia", 4: "Quarta",
    5: "Quinta", 6: "Sexta", 7: "Septima", 8: "Octava",
}


def ucfirst(s: str) -> str:
    return s[:1].upper() + s[1:]


def to_roman(n: int) -> str:
    out = []
    for value, glyph in ((10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I")):
        while n >= value:
            out.append(glyph)
            n -= value
    return "".join(out)


def normalize_tag(tag: str) -> str:
    """'pt-br' -> 'pt_BR'; an empty tag means the fallback language."""
    parts = [p for p in tag.strip().replace("-", "_").split("_") if p]
    if not parts:
        return FALLBACK_LANGUAGE
    out = [parts[0].lower()]
    for p in parts[1:]:
        out.append(p.upper() if len(p) == 2 else p.title() if len(p) == 4 else p)
    return "_".join(out)


def fallback_chain(tag: str, fallback: str = FALLBACK_LANGUAGE) -> Tuple[str, ...]:
    norm = normalize_tag(tag)
    chain = [norm, norm.split("_")[0], fallback]
    out: list[str] = []
    for t in chain:
        if t not in out:
            out.append(t)
    return tuple(out)


def _parse_babel(tag: str) -> Optional[Locale]:
    try:
        return Locale.parse(tag)
    except (UnknownLocaleError, ValueError, TypeError):
        return None


@dataclass(frozen=True)
class LocaleContext:
    requested: str
    chain: Tuple[str, ...]
    resolved: str
    degraded: bool
    babel_locale: Optional[Locale] = field(default=None, repr=False, compare=False)

    @property
    def language(self) -> str:
        return self.resolved.split("_")[0]

    @property
    def is_latin(self) -> bool:
        return self.language == "la"

    @classmethod
    def create(cls, tag: str, *, fallback: str = FALLBACK_LANGUAGE) -> "LocaleContext":
        chain = fallback_chain(tag, fallback)
        if chain[0].split("_")[0] == "la":
            return cls(requested=tag, chain=chain, resolved="la", degraded=False)

        for i, t in enumerate(chain):
            loc = _parse_babel(t)
            if loc is None:
                continue
            degraded = t.split("_")[0] != chain[0].split("_")[0]
            if degraded:
                logger.warning("Locale '%s' is not available, formatting names in '%s'", tag, t)
            return cls(requested=tag, chain=chain[i:], resolved=t, degraded=degraded, babel_locale=loc)

        # The fallback itself is unknown to CLDR; fixed English tables still work
        logger.warning("No CLDR data for '%s' or its fallbacks", tag)
        return cls(requested=tag, chain=(fallback,), resolved=fallback, degraded=True)

    # ---------------------------------------------------------
    # Formatting (never raises)
    # ---------------------------------------------------------

    def weekday_name(self, weekday: int) -> str:
        """Weekday name, 0=Sunday..6=Saturday, first letter capitalized."""
        if self.is_latin:
            return LATIN_WEEKDAYS[weekday]
        if self.babel_locale is None:
            return ENGLISH_WEEKDAYS[weekday]
        ref = _REFERENCE_SUNDAY + timedelta(days=weekday)
        try:
            return ucfirst(format_date(ref, "EEEE", locale=self.babel_locale))
        except (KeyError, ValueError, AttributeError):
            logger.warning("Weekday formatting failed for '%s'", self.resolved)
            return ENGLISH_WEEKDAYS[weekday]

    def ordinal(self, n: int) -> str:
        """Numeric ordinal ('1st', '1º', '1.'); Latin uses the genitive table."""
        if self.is_latin:
            return LATIN_ORDINALS_GENITIVE.get(n, to_roman(n))
        for t in self.chain:
            try:
                return num2words(n, lang=t, to="ordinal_num")
            except (NotImplementedError, KeyError, ValueError):
                continue
        return f"{n}."

    def month_day(self, month: int, day: int) -> str:
        """'December 17', '17 dicembre', '17 Decembris'."""
        if self.is_latin:
            return f"{day} {LATIN_MONTHS_GENITIVE[month - 1]}"
        if self.babel_locale is not None:
            try:
                return format_skeleton("MMMMd", datetime(2024, month, day), locale=self.babel_locale)
            except (KeyError, ValueError, AttributeError):
                logger.warning("Date formatting failed for '%s'", self.resolved)
        return f"{ENGLISH_MONTHS[month - 1]} {day}"
