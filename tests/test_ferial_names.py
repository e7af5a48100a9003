# tests/test_ferial_names.py

import pytest

from litcal.core.types import LitSeason
from litcal.engines.ferial_names import (
    DayAfterKey,
    FerialNameGenerator,
    HolyWeekKey,
    OctaveDayKey,
    SeasonDateKey,
    SeasonSundayKey,
    SeasonWeekdayKey,
    TEMPLATES,
    generate_name,
    key_pattern,
    parse_event_key,
    season_name,
)
from litcal.engines.locale import LocaleContext

@pytest.mark.parametrize("key, shape", [
    ("LentWeekday1Monday", SeasonWeekdayKey(LitSeason.LENT, 1, 1)),
    ("OrdWeekday12Saturday", SeasonWeekdayKey(LitSeason.ORDINARY_TIME, 12, 6)),
    ("EasterWeekday2Monday", SeasonWeekdayKey(LitSeason.EASTER, 2, 1)),
    ("Advent3", SeasonSundayKey(LitSeason.ADVENT, 3)),
    ("OrdSunday15", SeasonSundayKey(LitSeason.ORDINARY_TIME, 15)),
    ("AdventWeekdayDec17", SeasonDateKey(LitSeason.ADVENT, 12, 17)),
    ("ChristmasWeekdayJan2", SeasonDateKey(LitSeason.CHRISTMAS, 1, 2)),
    ("DayAfterEpiphanyJan8", SeasonDateKey(LitSeason.CHRISTMAS, 1, 8, after_epiphany=True)),
    ("ChristmasWeekdayDec29", OctaveDayKey(LitSeason.CHRISTMAS, 5)),
    ("MonOctaveEaster", OctaveDayKey(LitSeason.EASTER, 2)),
    ("DayAfterEpiphanyMonday", DayAfterKey("Epiphany", 1)),
    ("ThursdayAfterAshWednesday", DayAfterKey("AshWednesday", 4)),
    ("TueHolyWeek", HolyWeekKey(2)),
])
def test_parse_key_shapes(key, shape):
    assert parse_event_key(key) == shape
    assert shape.event_key == key

@pytest.mark.parametrize("key", [
    "StJoseph",
    "Easter",
    "LentWeekday6Monday",     # Lent has five numbered weeks
    "OrdWeekday35Monday",
    "OrdWeekday0Monday",
    "LentWeekday1Sunday",     # Sundays have their own keys
    "OrdSunday1",
    "Advent01",
    "AdventWeekdayDec16",
    "ChristmasWeekdayDec25",
    "xLentWeekday1Monday",
    "LentWeekday1MondayX",
    "",
])
def test_unrecognized_keys(key):
    assert parse_event_key(key) is None
    assert generate_name(key, "en") is None

@pytest.mark.parametrize("key, expected", [
    ("LentWeekday1Monday", "Monday of the 1st Week of Lent"),
    ("OrdWeekday12Saturday", "Saturday of the 12th Week of Ordinary Time"),
    ("Advent1", "1st Sunday of Advent"),
    ("Easter2", "2nd Sunday of Easter"),
    ("AdventWeekdayDec17", "December 17"),
    ("DayAfterEpiphanyJan8", "January 8"),
    ("ChristmasWeekdayDec29", "5th Day of the Octave of Christmas"),
    ("MonOctaveEaster", "Monday within the Octave of Easter"),
    ("ThursdayAfterAshWednesday", "Thursday after Ash Wednesday"),
    ("WedHolyWeek", "Wednesday of Holy Week"),
])
def test_english_names(key, expected):
    assert generate_name(key, "en") == expected

@pytest.mark.parametrize("key, expected", [
    ("LentWeekday1Monday", "Feria II Hebdomadæ Primæ Quadragesimæ"),
    ("Advent1", "Dominica I Adventus"),
    ("OrdSunday15", "Dominica XV per annum"),
    ("AdventWeekdayDec17", "17 Decembris"),
    ("ChristmasWeekdayDec26", "Dies Secunda infra Octavam Nativitatis"),
    ("SatOctaveEaster", "Sabbato infra Octavam Paschæ"),
])
def test_latin_names(key, expected):
    assert generate_name(key, "la") == expected

def test_italian_name():
    assert generate_name("LentWeekday1Monday", "it").startswith("Lunedì della ")
    assert generate_name("LentWeekday1Monday", "it").endswith("settimana di Quaresima")

def test_regional_tag_uses_base_language_templates():
    name = generate_name("LentWeekday1Monday", "pt-BR")
    assert name.endswith("Semana da Quaresma")

def test_language_without_templates_falls_back_to_english():
    gen = FerialNameGenerator.for_locale("nl")
    assert gen.degraded
    assert gen.language == "en"
    assert gen.generate("LentWeekday1Monday") == "Monday of the 1st Week of Lent"

def test_unknown_locale_falls_back_to_english():
    assert generate_name("LentWeekday1Monday", "xx") == "Monday of the 1st Week of Lent"

def test_generator_not_degraded_for_supported_locale():
    assert not FerialNameGenerator.for_locale("la").degraded
    assert not FerialNameGenerator.for_locale("en").degraded

@pytest.mark.parametrize("season, locale, expected", [
    (LitSeason.ORDINARY_TIME, "en", "Ordinary Time"),
    (LitSeason.EASTER_TRIDUUM, "en", "Easter Triduum"),
    (LitSeason.ADVENT, "la", "Tempus Adventus"),
    (LitSeason.CHRISTMAS, "la", "Tempus Nativitatis"),
    (LitSeason.LENT, "la", "Tempus Quadragesimæ"),
    (LitSeason.EASTER_TRIDUUM, "la", "Triduum Paschale"),
    (LitSeason.EASTER, "la", "Tempus Paschale"),
    (LitSeason.ORDINARY_TIME, "la", "Tempus per annum"),
    (LitSeason.LENT, "it", "Quaresima"),
    (LitSeason.ORDINARY_TIME, "pt_BR", "Tempo Comum"),
    (LitSeason.EASTER, "xx", "Easter"),
])
def test_season_names(season, locale, expected):
    assert season_name(season, LocaleContext.create(locale)) == expected

def test_every_language_names_every_season():
    for lang, table in TEMPLATES.items():
        assert {f"season_{s.name}" for s in LitSeason} <= set(table), lang

@pytest.mark.parametrize("key, pattern", [
    ("OrdWeekday12Saturday", "season_weekday"),
    ("Lent4", "season_sunday"),
    ("ChristmasWeekdayJan6", "season_date"),
    ("ChristmasWeekdayDec29", "octave_day"),
    ("FridayAfterAshWednesday", "day_after"),
    ("TueHolyWeek", "holy_week"),
    ("StJoseph", None),
    ("Advent9", None),
])
def test_key_pattern(key, pattern):
    assert key_pattern(key) == pattern
