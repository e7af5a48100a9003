# tests/test_locale.py

import logging

from litcal.engines.locale import (
    LocaleContext,
    fallback_chain,
    normalize_tag,
    to_roman,
)

def test_normalize_tag():
    assert normalize_tag("pt-br") == "pt_BR"
    assert normalize_tag("EN") == "en"
    assert normalize_tag("zh-hant-tw") == "zh_Hant_TW"
    assert normalize_tag("") == "en"

def test_fallback_chain_three_tiers():
    assert fallback_chain("pt-BR") == ("pt_BR", "pt", "en")
    assert fallback_chain("it") == ("it", "en")
    assert fallback_chain("en_US") == ("en_US", "en")
    assert fallback_chain("en") == ("en",)

def test_roman():
    assert to_roman(1) == "I"
    assert to_roman(4) == "IV"
    assert to_roman(14) == "XIV"
    assert to_roman(33) == "XXXIII"

def test_latin_context_uses_tables():
    ctx = LocaleContext.create("la")
    assert ctx.is_latin
    assert not ctx.degraded
    assert ctx.weekday_name(1) == "Feria II"
    assert ctx.weekday_name(6) == "Sabbato"
    assert ctx.ordinal(1) == "Primæ"
    assert ctx.ordinal(23) == "Vigesimæ Tertiæ"
    assert ctx.month_day(12, 17) == "17 Decembris"

def test_english_context():
    ctx = LocaleContext.create("en")
    assert ctx.resolved == "en"
    assert not ctx.degraded
    assert ctx.weekday_name(0) == "Sunday"
    assert ctx.weekday_name(1) == "Monday"
    assert ctx.ordinal(1) == "1st"
    assert ctx.ordinal(22) == "22nd"
    assert ctx.month_day(12, 17) == "December 17"

def test_italian_weekday_capitalized():
    ctx = LocaleContext.create("it")
    assert ctx.weekday_name(1) == "Lunedì"

def test_unknown_locale_degrades_without_raising(caplog):
    with caplog.at_level(logging.WARNING, logger="litcal.engines.locale"):
        ctx = LocaleContext.create("xx-YY")
    assert ctx.degraded
    assert ctx.language == "en"
    assert ctx.weekday_name(1) == "Monday"
    assert any("xx-YY" in r.getMessage() for r in caplog.records)

def test_regional_tag_keeps_language():
    ctx = LocaleContext.create("pt-BR")
    assert ctx.language == "pt"
    assert not ctx.degraded
