# tests/test_api.py

from datetime import date

import pytest

import litcal
from litcal import api
from litcal.bootstrap import build_registry
from litcal.core.types import FixedDate, Grade, Jurisdiction, JurisdictionLevel, Outcome, YearType


@pytest.fixture
def fresh_registry(monkeypatch):
    monkeypatch.setattr(api, "_registry", build_registry())


def test_list_catalogs():
    assert litcal.list_catalogs() == ["europe", "general-roman", "it", "rome", "us"]

def test_catalog_info():
    info = litcal.catalog_info("rome")
    assert info["jurisdiction"] == "diocesan:ROME"
    assert info["parent"] == "IT"
    assert info["events"] > 0

    with pytest.raises(KeyError) as ei:
        litcal.catalog_info("nope")
    assert "general-roman" in str(ei.value)

def test_easter_and_anchors():
    assert litcal.easter(2024) == date(2024, 3, 31)
    a = litcal.anchors(2024)
    assert a["easter"] == date(2024, 3, 31)
    assert a["pentecost"] == date(2024, 5, 19)
    assert a["christmas2"] is None

def test_ferial_name():
    assert litcal.ferial_name("OrdWeekday10Monday") == "Monday of the 10th Week of Ordinary Time"
    assert litcal.ferial_name("Advent1", locale="la") == "Dominica I Adventus"
    assert litcal.ferial_name("StJoseph") is None

def test_compute_calendar_defaults():
    cal, diag = litcal.compute_calendar(2024)
    assert cal.year_type == YearType.CIVIL
    assert [str(j) for j in cal.jurisdictions] == ["universal"]
    assert cal[date(2024, 3, 31)].celebrated.event_key == "Easter"
    assert len(diag.transfers) >= 2

def test_compute_calendar_liturgical_year():
    cal, _ = litcal.compute_calendar(2025, year_type=YearType.LITURGICAL)
    assert cal.start == date(2024, 12, 1)
    assert cal.end == date(2025, 11, 29)

def test_national_calendars():
    cal, _ = litcal.compute_calendar(2024, nation="us")
    assert cal[date(2024, 5, 12)].celebrated.event_key == "Ascension"

    cal, _ = litcal.compute_calendar(2024, nation="IT")
    e = cal[date(2024, 4, 29)].celebrated
    assert e.jurisdiction == Jurisdiction(JurisdictionLevel.NATIONAL, "IT")

def test_bad_jurisdiction():
    with pytest.raises(litcal.ConfigurationError):
        litcal.compute_calendar(2024, nation="XX")
    with pytest.raises(litcal.ConfigurationError):
        litcal.compute_calendar(2024, nation="US", diocese="ROME")
    with pytest.raises(litcal.ConfigurationError):
        litcal.compute_calendar(2024, nation="US", wider_region="EUROPE")

def test_day_info_attributes():
    day = litcal.day_info(
        date(2024, 6, 10),
        attributes=("weekday", "season", "season_week", "psalter_week", "sunday_cycle", "weekday_cycle"),
    )
    assert day.celebrated.event_key == "OrdWeekday10Monday"
    assert day.attributes == {
        "weekday": 1,
        "season": "ORDINARY_TIME",
        "season_week": 10,
        "psalter_week": 2,
        "sunday_cycle": "B",
        "weekday_cycle": "II",
    }
    assert day.to_dict()["attributes"]["season_week"] == 10

def test_day_info_unknown_attribute():
    with pytest.raises(KeyError) as ei:
        litcal.day_info(date(2024, 6, 10), attributes=("moon",))
    assert "psalter_week" in str(ei.value)

def test_day_info_without_attributes():
    day = litcal.day_info(date(2024, 12, 9))
    assert day.attributes is None
    assert day.celebrated.event_key == "ImmaculateConception"
    assert day.celebrated.outcome == Outcome.TRANSFERRED_TO

def test_explain():
    out = litcal.explain(date(2024, 3, 25))
    assert out["date"] == "2024-03-25"
    assert out["span"] == ["2024-01-01", "2024-12-31"]
    assert out["jurisdictions"] == ["universal"]
    assert out["jurisdiction_order"] == ["diocesan", "national", "widerregion", "universal"]
    keys = [e["event_key"] for e in out["day"]["entries"]]
    assert keys[0] == "MonHolyWeek"
    assert "Annunciation" in keys
    kinds = [(d["kind"], d["event_key"], d["target"]) for d in out["diagnostics"]]
    assert ("transfer", "Annunciation", "2024-04-08") in kinds

def test_register_catalog(fresh_registry):
    extra = litcal.catalog_from_records(
        [{"event_key": "StPatrick", "grade": "SOLEMNITY", "month": 3, "day": 17, "overrides": True,
          "i18n": {"en": "Saint Patrick, bishop, patron of Ireland"}}],
        jurisdiction=Jurisdiction(JurisdictionLevel.NATIONAL, "IE"),
        name="Ireland",
    )
    litcal.register_catalog("ie", extra)
    assert "ie" in litcal.list_catalogs()
    with pytest.raises(KeyError):
        litcal.register_catalog("ie", extra)
    litcal.register_catalog("ie", extra, overwrite=True)

    # 2024-03-17 is the 5th Sunday of Lent
    cal, diag = litcal.compute_calendar(2024, nation="IE")
    day = cal[date(2024, 3, 17)]
    assert day.celebrated.event_key == "Lent5"
    patrick = day.get("StPatrick")
    assert patrick.outcome == Outcome.TRANSFERRED_FROM
    assert patrick.grade == Grade.SOLEMNITY
    assert patrick.transferred_to == date(2024, 3, 18)
    assert cal[date(2024, 3, 18)].celebrated.name == "Saint Patrick, bishop, patron of Ireland"

def test_overlay_sources_are_added():
    extra = litcal.catalog_from_records(
        [{"event_key": "LocalFeast", "grade": "FEAST", "month": 8, "day": 20, "name": "Local Feast"}],
        jurisdiction=Jurisdiction(JurisdictionLevel.NATIONAL, "ZZ"),
    )
    cal, _ = litcal.compute_calendar(2024, nation="ZZ", overlay_sources=[extra])
    assert cal[date(2024, 8, 20)].celebrated.name == "Local Feast"
    assert "ZZ" not in [j.code for j in litcal.compute_calendar(2024)[0].jurisdictions]

def test_registry_not_initialized(monkeypatch):
    monkeypatch.setattr(api, "_registry", None)
    with pytest.raises(RuntimeError):
        litcal.list_catalogs()

def test_fixed_date_reexports():
    assert FixedDate(3, 17) == FixedDate(3, 17)
    assert litcal.Grade.SOLEMNITY > litcal.Grade.FEAST
