"""
litcal.catalogs.loader
----------------------
Builds EventCatalogs from plain JSON-like records.

A record names exactly one date rule:

    {"event_key": "StPatrick", "grade": "SOLEMNITY", "month": 3, "day": 17,
     "color": ["white"], "i18n": {"en": "Saint Patrick, bishop"}}

    {"event_key": "X", "grade": 4, "easter_offset": 50}
    {"event_key": "X", "grade": "FEAST", "anchor": "advent1", "offset": -1}
    {"event_key": "X", "grade": "MEMORIAL", "season": "EASTER", "week": 3, "weekday": 2}
    {"event_key": "X", "grade": "WEEKDAY", "season": "ADVENT", "month": 12, "day": 20}
    {"event_key": "X", "grade": "SOLEMNITY", "month": 5, "day": 1, "readings_type": "seasonal"}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..core.errors import ConfigurationError
from ..core.types import (
    AnchorOffset,
    Color,
    DateRule,
    EasterOffset,
    EventCatalog,
    FixedDate,
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    LitSeason,
    LiturgicalEvent,
    Precedence,
    ReadingsType,
    SeasonDate,
    SeasonWeekday,
)
from ..engines.ferial_names import key_pattern
from ..engines.locale import normalize_tag

_KNOWN_FIELDS = frozenset({
    "event_key", "grade", "color", "common", "since_year", "until_year", "i18n", "name",
    "must_celebrate", "overrides", "precedence", "temporale", "readings_type",
    "month", "day", "easter_offset", "anchor", "offset", "season", "week", "weekday", "after_epiphany",
})


def _enum(kind, value: Any, what: str):
    if isinstance(value, kind):
        return value
    try:
        if isinstance(value, int) and not isinstance(value, bool):
            return kind(value)
        return kind[str(value).upper()]
    except (KeyError, ValueError):
        raise ConfigurationError(f"Invalid {what} {value!r}. Available: {[x.name for x in kind]}") from None


def _int(rec: Mapping[str, Any], name: str, key: str) -> int:
    v = rec[name]
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigurationError(f"'{key}': {name} must be an integer, got {v!r}")
    return v


def _opt_int(rec: Mapping[str, Any], name: str, key: str) -> Optional[int]:
    return None if rec.get(name) is None else _int(rec, name, key)


def _opt_bool(rec: Mapping[str, Any], name: str, key: str) -> Optional[bool]:
    v = rec.get(name)
    if v is not None and not isinstance(v, bool):
        raise ConfigurationError(f"'{key}': {name} must be true or false, got {v!r}")
    return v


def _common(rec: Mapping[str, Any], key: str) -> tuple:
    v = rec.get("common", [])
    if not isinstance(v, (list, tuple)) or not all(isinstance(c, str) for c in v):
        raise ConfigurationError(f"'{key}': common must be a list of strings, got {v!r}")
    return tuple(v)


def _color(value: Any, key: str) -> Color:
    try:
        return Color(str(value).lower())
    except ValueError:
        raise ConfigurationError(f"'{key}': unknown color {value!r}") from None


def date_rule_from_record(rec: Mapping[str, Any]) -> DateRule:
    key = rec.get("event_key", "?")
    if "easter_offset" in rec:
        if rec["easter_offset"] is None:
            return EasterOffset(None)
        return EasterOffset(_int(rec, "easter_offset", key))
    if "anchor" in rec:
        return AnchorOffset(str(rec["anchor"]), _int(rec, "offset", key) if rec.get("offset") is not None else 0)
    if "season" in rec:
        season = _enum(LitSeason, rec["season"], "season")
        if "week" in rec:
            return SeasonWeekday(season, _int(rec, "week", key), _int(rec, "weekday", key) if "weekday" in rec else 0)
        if "month" in rec and "day" in rec:
            return SeasonDate(
                season, _int(rec, "month", key), _int(rec, "day", key),
                after_epiphany=bool(_opt_bool(rec, "after_epiphany", key)),
            )
        raise ConfigurationError(f"'{key}': a seasonal rule needs week/weekday or month/day")
    if "month" in rec and "day" in rec:
        return FixedDate(_int(rec, "month", key), _int(rec, "day", key))
    raise ConfigurationError(f"'{key}': no date rule (month/day, easter_offset, anchor or season)")


def event_from_record(rec: Mapping[str, Any], jurisdiction: Jurisdiction) -> LiturgicalEvent:
    if not isinstance(rec, Mapping):
        raise ConfigurationError(f"Event record must be an object, got {type(rec).__name__}")
    key = rec.get("event_key")
    if not key or not isinstance(key, str):
        raise ConfigurationError(f"Event record without event_key: {dict(rec)!r}")
    unknown = sorted(set(rec) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigurationError(f"'{key}': unknown fields {unknown}")
    if "grade" not in rec:
        raise ConfigurationError(f"'{key}': missing grade")

    i18n: Dict[str, str] = {normalize_tag(k): str(v) for k, v in (rec.get("i18n") or {}).items()}
    if "name" in rec and "en" not in i18n:
        i18n["en"] = str(rec["name"])

    colors = rec.get("color", ["white"])
    if isinstance(colors, str):
        colors = [colors]

    since = _opt_int(rec, "since_year", key)
    until = _opt_int(rec, "until_year", key)
    if since is not None and until is not None and since > until:
        raise ConfigurationError(f"'{key}': since_year {since} is after until_year {until}")

    return LiturgicalEvent(
        event_key=key,
        date_rule=date_rule_from_record(rec),
        grade=_enum(Grade, rec["grade"], "grade"),
        color=tuple(_color(c, key) for c in colors) or (Color.WHITE,),
        jurisdiction=jurisdiction,
        common=_common(rec, key),
        since_year=since,
        until_year=until,
        i18n=i18n,
        name_pattern=key_pattern(key),
        must_celebrate=_opt_bool(rec, "must_celebrate", key),
        precedence=_enum(Precedence, rec["precedence"], "precedence") if rec.get("precedence") is not None else None,
        overrides=bool(rec.get("overrides", False)),
        temporale=bool(rec.get("temporale", False)),
        readings=_enum(ReadingsType, rec["readings_type"], "readings_type") if rec.get("readings_type") is not None else None,
    )


def catalog_from_records(
    records: Iterable[Mapping[str, Any]],
    *,
    jurisdiction: Jurisdiction,
    name: Optional[str] = None,
    parent: Optional[str] = None,
    members: Iterable[str] = (),
    epiphany_on_sunday: Optional[bool] = None,
) -> EventCatalog:
    events = tuple(event_from_record(r, jurisdiction) for r in records)
    return EventCatalog(
        name=name or str(jurisdiction),
        jurisdiction=jurisdiction,
        events=events,
        parent=parent.upper() if parent else None,
        members=frozenset(m.upper() for m in members),
        epiphany_on_sunday=epiphany_on_sunday,
    )


def catalog_from_document(doc: Mapping[str, Any]) -> EventCatalog:
    """{"name", "level", "code", "parent", "members", "epiphany_on_sunday", "events"} -> EventCatalog"""
    level = doc.get("level")
    try:
        lvl = JurisdictionLevel(str(level).lower())
    except ValueError:
        raise ConfigurationError(f"Unknown jurisdiction level {level!r}") from None
    code = doc.get("code")
    if lvl == JurisdictionLevel.UNIVERSAL:
        if code:
            raise ConfigurationError("The universal calendar takes no code")
        jurisdiction = Jurisdiction(lvl)
    else:
        if not code:
            raise ConfigurationError(f"A {lvl.value} calendar needs a code")
        jurisdiction = Jurisdiction(lvl, str(code).upper())
    events = doc.get("events")
    if not isinstance(events, list):
        raise ConfigurationError("'events' must be a list of event records")
    epiphany = doc.get("epiphany_on_sunday")
    if epiphany is not None and not isinstance(epiphany, bool):
        raise ConfigurationError(f"epiphany_on_sunday must be true or false, got {epiphany!r}")
    return catalog_from_records(
        events,
        jurisdiction=jurisdiction,
        name=doc.get("name"),
        parent=doc.get("parent"),
        members=doc.get("members") or (),
        epiphany_on_sunday=epiphany,
    )


def load_catalog(path: Union[str, Path]) -> EventCatalog:
    p = Path(path)
    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{p}: invalid JSON ({e})") from e
    if not isinstance(doc, dict):
        raise ConfigurationError(f"{p}: expected a JSON object")
    return catalog_from_document(doc)
