from __future__ import annotations
from datetime import date, timedelta


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def dow(d: date) -> int:
    """Day of week with 0=Sunday..6=Saturday (JDN 0 is a Monday)."""
    return (to_jdn(d) + 1) % 7

def is_sunday(d: date) -> bool:
    return dow(d) == 0

def sunday_on_or_before(d: date) -> date:
    return d - timedelta(days=dow(d))

def sunday_after(d: date) -> date:
    """First Sunday strictly after d."""
    return d + timedelta(days=7 - dow(d))

def date_range(start: date, end: date):
    """Inclusive day-by-day iteration."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
