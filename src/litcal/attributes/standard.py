from __future__ import annotations
from typing import Any, Dict

from ..engines.computus import compute_anchors
from ..engines.lectionary import liturgical_year_of, sunday_cycle as _sunday_cycle, weekday_cycle as _weekday_cycle
from ..engines.seasons import season_for_date, season_week as _season_week
from .registry import register_attribute, weekday_index

def weekday(day) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat
    return {"weekday": weekday_index(day)}

def season(day) -> Dict[str, Any]:
    # the resolved entries carry the season of the calendar they were resolved in
    if day.celebrated is not None:
        return {"season": day.celebrated.season.value}
    return {"season": season_for_date(day.date).value}

def season_week(day) -> Dict[str, Any]:
    return {"season_week": _season_week(day.date, compute_anchors(day.date.year))}

def psalter_week(day) -> Dict[str, Any]:
    # Four-week psalter; the days after Ash Wednesday use week 4
    w = _season_week(day.date, compute_anchors(day.date.year))
    if w is None:
        return {"psalter_week": None}
    return {"psalter_week": 4 if w == 0 else (w - 1) % 4 + 1}

def sunday_cycle(day) -> Dict[str, Any]:
    return {"sunday_cycle": _sunday_cycle(liturgical_year_of(day.date))}

def weekday_cycle(day) -> Dict[str, Any]:
    return {"weekday_cycle": _weekday_cycle(liturgical_year_of(day.date))}

register_attribute("weekday", weekday)
register_attribute("season", season)
register_attribute("season_week", season_week)
register_attribute("psalter_week", psalter_week)
register_attribute("sunday_cycle", sunday_cycle)
register_attribute("weekday_cycle", weekday_cycle)
