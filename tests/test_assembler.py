# tests/test_assembler.py

from datetime import date

import pytest

from litcal.catalogs.builtin import ALL_CATALOGS
from litcal.catalogs.general import GENERAL_ROMAN
from litcal.core.errors import ConfigurationError
from litcal.core.types import (
    CalendarConfig,
    DiagnosticKind,
    EventCatalog,
    FixedDate,
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    Jurisdictions,
    LectionaryCategory,
    LitSeason,
    LiturgicalEvent,
    Outcome,
    PrecedenceTable,
    ReadingsType,
    UNIVERSAL,
    YearType,
)
from litcal.engines.assembler import CalendarAssembler, EventNamer, compute_calendar, year_span
from litcal.engines.lectionary import readings_type


@pytest.fixture(scope="module")
def cal2024():
    return compute_calendar(2024, "en", None, [GENERAL_ROMAN])


def _all():
    return list(ALL_CATALOGS.values())


def test_year_span():
    assert year_span(2024) == (date(2024, 1, 1), date(2024, 12, 31))
    assert year_span(2024, YearType.LITURGICAL) == (date(2023, 12, 3), date(2024, 11, 30))

def test_civil_year_shape(cal2024):
    cal, _ = cal2024
    assert len(cal) == 366
    assert cal.start == date(2024, 1, 1)
    assert cal.end == date(2024, 12, 31)
    assert cal.easter == date(2024, 3, 31)
    assert cal.sunday_cycle == "B"
    assert cal.weekday_cycle == "II"
    assert cal.jurisdictions == (UNIVERSAL,)
    assert list(cal) == sorted(cal)

def test_every_day_has_one_celebration(cal2024):
    cal, _ = cal2024
    for d in cal:
        day = cal[d]
        main = [e for e in day.entries if e.outcome in (Outcome.CELEBRATED, Outcome.TRANSFERRED_TO)]
        assert len(main) == 1, d
        assert day.celebrated is main[0]

def test_easter_sunday(cal2024):
    cal, _ = cal2024
    e = cal[date(2024, 3, 31)].celebrated
    assert e.event_key == "Easter"
    assert e.name == "Easter Sunday of the Resurrection of the Lord"
    assert e.grade == Grade.HIGHER_SOLEMNITY
    assert e.season == LitSeason.EASTER

def test_annunciation_transferred_after_easter_octave(cal2024):
    cal, diag = cal2024
    recs = cal.find("Annunciation")
    assert [(d, e.outcome) for d, e in recs] == [
        (date(2024, 3, 25), Outcome.TRANSFERRED_FROM),
        (date(2024, 4, 8), Outcome.TRANSFERRED_TO),
    ]
    assert recs[0][1].transferred_to == date(2024, 4, 8)
    assert recs[1][1].transferred_from == date(2024, 3, 25)
    assert cal[date(2024, 3, 25)].celebrated.event_key == "MonHolyWeek"

    t = [x for x in diag.transfers if x.event_key == "Annunciation"]
    assert len(t) == 1
    assert (t[0].on, t[0].target) == (date(2024, 3, 25), date(2024, 4, 8))

def test_immaculate_conception_moves_off_advent_sunday(cal2024):
    cal, _ = cal2024
    assert cal[date(2024, 12, 8)].celebrated.event_key == "Advent2"
    landed = cal[date(2024, 12, 9)].celebrated
    assert landed.event_key == "ImmaculateConception"
    assert landed.outcome == Outcome.TRANSFERRED_TO
    assert landed.transferred_from == date(2024, 12, 8)

def test_transfer_records_pair_up(cal2024):
    cal, _ = cal2024
    for d in cal:
        for e in cal[d].with_outcome(Outcome.TRANSFERRED_TO):
            origin = cal[e.transferred_from].get(e.event_key)
            assert origin.outcome == Outcome.TRANSFERRED_FROM
            assert origin.transferred_to == d

def test_memorial_on_privileged_weekday_is_commemorated(cal2024):
    cal, _ = cal2024
    day = cal[date(2024, 3, 7)]
    assert day.celebrated.event_key == "LentWeekday3Thursday"
    e = day.get("StsPerpetuaFelicity")
    assert e.outcome == Outcome.COMMEMORATED
    assert e.grade == Grade.COMMEMORATION
    assert e.reason == "memorial on a privileged weekday"

def test_lectionary(cal2024):
    cal, _ = cal2024
    heart = cal[date(2024, 6, 8)].get("ImmaculateHeart")
    assert heart.lectionary == LectionaryCategory.SANCTORUM
    assert heart.readings_cycle is None

    pentecost = cal[date(2024, 5, 19)].celebrated
    assert pentecost.event_key == "Pentecost"
    assert pentecost.lectionary == LectionaryCategory.SUNDAYS_SOLEMNITIES
    assert pentecost.readings_cycle == "B"

    # a new liturgical year starts with Advent
    advent = cal[date(2024, 12, 1)].celebrated
    assert advent.event_key == "Advent1"
    assert advent.season == LitSeason.ADVENT
    assert advent.readings_cycle == "C"

    weekday = cal[date(2024, 6, 10)].celebrated
    assert weekday.lectionary == LectionaryCategory.WEEKDAYS_ORDINARY
    assert weekday.readings_cycle == "II"

@pytest.mark.parametrize("key, on, expected", [
    ("Christmas", date(2024, 12, 25), ReadingsType.CHRISTMAS),
    ("PalmSun", date(2024, 3, 24), ReadingsType.PALM_SUNDAY),
    ("EasterVigil", date(2024, 3, 30), ReadingsType.EASTER_VIGIL),
    ("Easter", date(2024, 3, 31), ReadingsType.WITH_EVENING),
    ("MonOctaveEaster", date(2024, 4, 1), ReadingsType.FESTIVE),
    ("Pentecost", date(2024, 5, 19), ReadingsType.FESTIVE_WITH_VIGIL),
    ("AllSouls", date(2024, 11, 2), ReadingsType.MULTIPLE_SCHEMAS),
    ("Advent1", date(2024, 12, 1), ReadingsType.FESTIVE),
    ("OrdWeekday10Monday", date(2024, 6, 10), ReadingsType.FERIAL),
    ("ChristmasWeekdayDec30", date(2024, 12, 30), ReadingsType.FERIAL),
    ("ImmaculateHeart", date(2024, 6, 8), ReadingsType.FESTIVE),
])
def test_readings_type(cal2024, key, on, expected):
    cal, _ = cal2024
    e = cal[on].get(key)
    assert e.readings_type == expected
    assert e.to_dict()["readings_type"] == expected.value

def test_readings_type_set_by_the_event():
    ev = LiturgicalEvent("Patron", FixedDate(5, 1), Grade.SOLEMNITY)
    assert readings_type(ev) == ReadingsType.FESTIVE
    assert readings_type(ev.tweak(readings=ReadingsType.SEASONAL)) == ReadingsType.SEASONAL
    assert readings_type(LiturgicalEvent("DayAfterEpiphanyMonday", FixedDate(1, 7), Grade.WEEKDAY)) == ReadingsType.FERIAL

def test_liturgical_year():
    cfg = CalendarConfig(year_type=YearType.LITURGICAL)
    cal, _ = compute_calendar(2024, "en", None, [GENERAL_ROMAN], config=cfg)
    assert cal.start == date(2023, 12, 3)
    assert cal.end == date(2024, 11, 30)
    assert date(2024, 12, 1) not in cal
    first = cal[cal.start].celebrated
    assert first.event_key == "Advent1"
    assert first.readings_cycle == "B"
    assert cal[date(2023, 12, 25)].celebrated.event_key == "Christmas"
    assert cal[date(2024, 11, 24)].celebrated.event_key == "ChristKing"

def test_idempotent():
    a, da = compute_calendar(2025, "en", None, [GENERAL_ROMAN])
    b, db = compute_calendar(2025, "en", None, [GENERAL_ROMAN])
    assert a.to_dict() == b.to_dict()
    assert da.to_dict() == db.to_dict()

def test_latin_names():
    cal, diag = compute_calendar(2024, "la", None, [GENERAL_ROMAN])
    assert cal[date(2024, 2, 19)].celebrated.name == "Feria II Hebdomadæ Primæ Quadragesimæ"
    assert cal[date(2024, 12, 1)].celebrated.name == "Dominica I Adventus"
    assert not diag.of_kind(DiagnosticKind.LOCALE_FALLBACK)

def test_unknown_locale_degrades_to_english():
    cal, diag = compute_calendar(2024, "xx", None, [GENERAL_ROMAN])
    assert cal[date(2024, 2, 19)].celebrated.name == "Monday of the 1st Week of Lent"
    assert len(diag.of_kind(DiagnosticKind.LOCALE_FALLBACK)) == 1

# ============================================================
# Jurisdictions
# ============================================================

def test_italy_patroness():
    cal, diag = compute_calendar(2024, "it", Jurisdictions(nation="IT"), _all())
    e = cal[date(2024, 4, 29)].celebrated
    assert e.event_key == "StCatherineSiena"
    assert e.grade == Grade.FEAST
    assert e.jurisdiction == Jurisdiction(JurisdictionLevel.NATIONAL, "IT")
    assert e.name == "Santa Caterina da Siena, vergine e dottore della Chiesa, patrona d'Italia"
    assert len(cal.find("StCatherineSiena")) == 1

    # no Italian name for this memorial: English is shown, once reported
    perpetua = cal[date(2024, 3, 7)].get("StsPerpetuaFelicity")
    assert perpetua.name == "Saints Perpetua and Felicity, martyrs"
    names = [x for x in diag.of_kind(DiagnosticKind.NAME_FALLBACK) if x.event_key == "StsPerpetuaFelicity"]
    assert len(names) == 1

def test_us_ascension_on_sunday():
    cal, diag = compute_calendar(2024, "en", Jurisdictions(nation="US"), _all())
    assert [d for d, _ in cal.find("Ascension")] == [date(2024, 5, 12)]
    day = cal[date(2024, 5, 12)]
    assert day.celebrated.event_key == "Ascension"
    assert day.get("Easter7").outcome == Outcome.SUPPRESSED
    assert cal[date(2024, 5, 9)].celebrated.event_key == "EasterWeekday6Thursday"
    assert any(x.event_key == "Ascension" for x in diag.of_kind(DiagnosticKind.OVERRIDE))

@pytest.mark.parametrize("year", range(2020, 2031))
def test_us_calendar_has_no_empty_days(year):
    cal, _ = compute_calendar(year, "en", Jurisdictions(nation="US"), _all())
    assert [d for d in cal if cal[d].celebrated is None] == []

def test_us_weekdays_around_a_sunday_epiphany():
    cal, _ = compute_calendar(2024, "en", Jurisdictions(nation="US"), _all())
    jan6 = cal[date(2024, 1, 6)].celebrated
    assert (jan6.event_key, jan6.name) == ("ChristmasWeekdayJan6", "January 6")
    assert jan6.season == LitSeason.CHRISTMAS
    assert cal[date(2024, 1, 7)].celebrated.event_key == "Epiphany"
    assert cal[date(2024, 1, 8)].celebrated.event_key == "BaptismLord"
    assert cal[date(2024, 1, 9)].celebrated.season == LitSeason.ORDINARY_TIME

    cal, _ = compute_calendar(2025, "en", Jurisdictions(nation="US"), _all())
    assert [d for d, _ in cal.find("Epiphany")] == [date(2025, 1, 5)]
    jan6 = cal[date(2025, 1, 6)].celebrated
    assert (jan6.event_key, jan6.name) == ("DayAfterEpiphanyMonday", "Monday after Epiphany")
    assert jan6.lectionary == LectionaryCategory.WEEKDAYS_CHRISTMAS
    assert cal[date(2025, 1, 12)].celebrated.event_key == "BaptismLord"

def test_rome_infers_nation():
    cal, _ = compute_calendar(2024, "en", Jurisdictions(diocese="rome"), _all())
    assert [str(j) for j in cal.jurisdictions] == ["universal", "widerregion:EUROPE", "national:IT", "diocesan:ROME"]
    e = cal[date(2024, 11, 9)].celebrated
    assert e.event_key == "DedicationLateran"
    assert e.grade == Grade.SOLEMNITY

def _custom(level, code, events, **kw):
    jur = Jurisdiction(level, code) if code else UNIVERSAL
    evs = tuple(
        LiturgicalEvent(event_key=k, date_rule=rule, grade=g, jurisdiction=jur, i18n={"en": k}, **extra)
        for k, rule, g, extra in events
    )
    return EventCatalog(name=code or "test", jurisdiction=jur, events=evs, **kw)

def test_diocesan_wins_grade_tie():
    uni = _custom(JurisdictionLevel.UNIVERSAL, None, [("U", FixedDate(6, 10), Grade.FEAST, {})])
    nat = _custom(JurisdictionLevel.NATIONAL, "ZZ", [])
    dio = _custom(JurisdictionLevel.DIOCESAN, "DD", [("D", FixedDate(6, 10), Grade.FEAST, {})], parent="ZZ")
    cal, diag = compute_calendar(2024, "en", Jurisdictions(diocese="DD"), [uni, nat, dio])

    day = cal[date(2024, 6, 10)]
    assert day.celebrated.event_key == "D"
    assert day.get("U").outcome == Outcome.SUPPRESSED
    assert [x.event_key for x in diag.suppressions] == ["U"]

    # reversed jurisdiction order
    order = tuple(reversed(PrecedenceTable().jurisdiction_order))
    cfg = CalendarConfig(precedence=PrecedenceTable(jurisdiction_order=order))
    cal, _ = compute_calendar(2024, "en", Jurisdictions(diocese="DD"), [uni, nat, dio], config=cfg)
    assert cal[date(2024, 6, 10)].celebrated.event_key == "U"

def test_unresolved_transfer():
    uni = _custom(JurisdictionLevel.UNIVERSAL, None, [
        ("Blocker", FixedDate(12, 31), Grade.HIGHER_SOLEMNITY, {"must_celebrate": False}),
        ("Victim", FixedDate(12, 31), Grade.SOLEMNITY, {}),
    ])
    cal, diag = compute_calendar(2024, "en", None, [uni])
    day = cal[date(2024, 12, 31)]
    assert day.celebrated.event_key == "Blocker"
    victim = day.get("Victim")
    assert victim.outcome == Outcome.SUPPRESSED
    assert victim.transferred_to is None
    assert "no open date" in victim.reason
    assert len(diag.unresolved) == 1
    assert diag.unresolved[0].event_key == "Victim"
    assert not diag.transfers

def test_source_checks():
    with pytest.raises(ConfigurationError):
        compute_calendar(2024, "en", None, [])
    with pytest.raises(ConfigurationError):
        compute_calendar(2024, "en", None, [GENERAL_ROMAN, GENERAL_ROMAN])
    with pytest.raises(ConfigurationError):
        compute_calendar(2024, "en", Jurisdictions(nation="FR"), _all())

def test_event_namer_order():
    ev = LiturgicalEvent(event_key="X", date_rule=FixedDate(1, 1), grade=Grade.FEAST,
                         i18n={"en": "Ex", "pt": "Xis"})
    assert EventNamer("pt_BR").name(ev) == ("Xis", False)
    assert EventNamer("de").name(ev) == ("Ex", True)
    assert EventNamer("en").name(ev) == ("Ex", False)
    bare = ev.tweak(i18n={})
    assert EventNamer("en").name(bare) == ("X", True)
    advent = ev.tweak(event_key="Advent1", i18n={}, name_pattern="season_sunday")
    assert EventNamer("en").name(advent) == ("1st Sunday of Advent", False)
    # a ferial-looking key without a pattern is a literal event
    assert EventNamer("en").name(advent.tweak(name_pattern=None)) == ("Advent1", True)

class _ShoutingNames:
    degraded = False

    def generate(self, event_key):
        return event_key.upper()

def test_event_namer_takes_any_generator():
    namer = EventNamer("en", generator=_ShoutingNames())
    ev = LiturgicalEvent("OrdWeekday3Monday", FixedDate(1, 1), Grade.WEEKDAY, name_pattern="season_weekday")
    assert namer.name(ev) == ("ORDWEEKDAY3MONDAY", False)
    assert not namer.degraded
    assert namer.name(ev.tweak(name_pattern=None, i18n={"en": "Plain"})) == ("Plain", False)

def test_generated_events_carry_their_key_shape():
    patterns = {e.event_key: e.name_pattern for e in GENERAL_ROMAN.events if e.name_pattern}
    assert patterns["OrdWeekday10Monday"] == "season_weekday"
    assert patterns["Advent1"] == "season_sunday"
    assert patterns["DayAfterEpiphanyMonday"] == "day_after"
    assert patterns["MonOctaveEaster"] == "octave_day"
    assert "Easter" not in patterns and "StJoseph" not in patterns

def test_assembler_info():
    asm = CalendarAssembler(GENERAL_ROMAN, [ALL_CATALOGS["it"]])
    info = asm.info()
    assert info["overlays"] == ["national:IT"]
    assert info["jurisdiction_order"] == ["diocesan", "national", "widerregion", "universal"]
    assert info["year_type"] == "CIVIL"
