# tests/test_precedence.py

import pytest
from datetime import date

from litcal.core.errors import ConfigurationError
from litcal.core.types import (
    UNIVERSAL,
    FixedDate,
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    LiturgicalEvent,
    Outcome,
    Precedence,
    PrecedenceTable,
)
from litcal.engines.precedence import Candidate, PrecedenceResolver, derive_precedence

D = date(2024, 6, 10)
IT = Jurisdiction(JurisdictionLevel.NATIONAL, "IT")
ROME = Jurisdiction(JurisdictionLevel.DIOCESAN, "ROME")
EUROPE = Jurisdiction(JurisdictionLevel.WIDER_REGION, "EUROPE")

def ev(key, grade, jurisdiction=UNIVERSAL, **kw):
    return LiturgicalEvent(event_key=key, date_rule=FixedDate(6, 10), grade=grade, jurisdiction=jurisdiction, **kw)

def cand(event, d=D, privileged=False):
    return Candidate.of(event, d, privileged_weekday=privileged)

def outcomes(res):
    return {v.candidate.event_key: v.outcome for v in res.verdicts}

def test_derive_precedence():
    assert derive_precedence(ev("a", Grade.HIGHER_SOLEMNITY)) == Precedence.PRIVILEGED_DAY
    assert derive_precedence(ev("a", Grade.SOLEMNITY)) == Precedence.GENERAL_SOLEMNITY
    assert derive_precedence(ev("a", Grade.SOLEMNITY, IT)) == Precedence.PROPER_SOLEMNITY
    assert derive_precedence(ev("a", Grade.FEAST_LORD)) == Precedence.GENERAL_FEAST_OF_THE_LORD
    assert derive_precedence(ev("a", Grade.FEAST, ROME)) == Precedence.PROPER_FEAST
    assert derive_precedence(ev("a", Grade.MEMORIAL)) == Precedence.GENERAL_MEMORIAL
    assert derive_precedence(ev("a", Grade.MEMORIAL_OPT)) == Precedence.OPTIONAL_MEMORIAL
    assert derive_precedence(ev("a", Grade.WEEKDAY)) == Precedence.WEEKDAY
    assert derive_precedence(ev("a", Grade.FEAST, precedence=Precedence.SUNDAY)) == Precedence.SUNDAY

def test_higher_grade_wins():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("w", Grade.WEEKDAY)), cand(ev("f", Grade.FEAST)), cand(ev("m", Grade.MEMORIAL))])
    assert res.winner.event_key == "f"
    out = outcomes(res)
    assert out["f"] == Outcome.CELEBRATED
    assert out["m"] == Outcome.SUPPRESSED
    assert out["w"] == Outcome.SUPPRESSED
    assert res.verdicts[0].candidate.event_key == "f"

def test_equal_grade_diocesan_beats_universal():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("u", Grade.FEAST)), cand(ev("d", Grade.FEAST, ROME))])
    assert res.winner.event_key == "d"
    assert outcomes(res)["u"] == Outcome.SUPPRESSED

def test_wider_region_order_is_configurable():
    natives = [cand(ev("n", Grade.FEAST, IT)), cand(ev("r", Grade.FEAST, EUROPE))]
    assert PrecedenceResolver().resolve(D, natives).winner.event_key == "n"

    table = PrecedenceTable(jurisdiction_order=("diocesan", "widerregion", "national", "universal"))
    assert PrecedenceResolver(table).resolve(D, natives).winner.event_key == "r"

def test_invalid_jurisdiction_order():
    with pytest.raises(ConfigurationError):
        PrecedenceTable(jurisdiction_order=("diocesan", "national", "universal"))
    with pytest.raises(ConfigurationError):
        PrecedenceTable(jurisdiction_order=("diocesan", "national", "national", "universal"))
    with pytest.raises(ValueError):
        PrecedenceTable(jurisdiction_order=("diocesan", "national", "province", "universal"))

def test_same_key_instance_is_superseded():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("x", Grade.MEMORIAL)), cand(ev("x", Grade.FEAST, IT))])
    assert res.winner.jurisdiction == IT
    v = [v for v in res.verdicts if v.candidate.jurisdiction == UNIVERSAL][0]
    assert v.outcome == Outcome.SUPPRESSED
    assert "national:IT" in v.reason

def test_optional_memorials_coexist_with_weekday():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("w", Grade.WEEKDAY)), cand(ev("om1", Grade.MEMORIAL_OPT)), cand(ev("om2", Grade.MEMORIAL_OPT))])
    out = outcomes(res)
    assert out["w"] == Outcome.CELEBRATED
    assert out["om1"] == Outcome.COMMEMORATED
    assert out["om2"] == Outcome.COMMEMORATED

def test_optional_memorial_suppressed_by_feast():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("f", Grade.FEAST)), cand(ev("om", Grade.MEMORIAL_OPT))])
    assert outcomes(res)["om"] == Outcome.SUPPRESSED

def test_memorial_on_privileged_weekday_is_commemorated():
    d = date(2024, 12, 20)
    r = PrecedenceResolver()
    w = cand(ev("AdventWeekdayDec20", Grade.WEEKDAY, precedence=Precedence.PRIVILEGED_WEEKDAY), d, privileged=True)
    m = cand(ev("m", Grade.MEMORIAL), d, privileged=True)
    assert m.reduced and m.grade == Grade.COMMEMORATION
    res = r.resolve(d, [w, m])
    out = outcomes(res)
    assert out["AdventWeekdayDec20"] == Outcome.CELEBRATED
    assert out["m"] == Outcome.COMMEMORATED

def test_only_coexisting_candidates():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("om", Grade.MEMORIAL_OPT))])
    assert res.winner.event_key == "om"
    assert outcomes(res)["om"] == Outcome.CELEBRATED

def test_empty_day():
    res = PrecedenceResolver().resolve(D, [])
    assert res.winner is None
    assert res.verdicts == ()

def test_impeded_solemnity_transfers_forward():
    r = PrecedenceResolver()
    sunday = cand(ev("Advent2", Grade.HIGHER_SOLEMNITY, must_celebrate=False))
    sol = cand(ev("ImmaculateConception", Grade.SOLEMNITY))
    res = r.resolve(D, [sunday, sol])
    assert outcomes(res)["ImmaculateConception"] == Outcome.TRANSFERRED_FROM
    assert res.transfers == (sol,)

def test_carried_transfer_lands_when_nothing_equal_or_higher():
    r = PrecedenceResolver()
    sol = cand(ev("ImmaculateConception", Grade.SOLEMNITY), d=date(2024, 12, 8))
    nxt = date(2024, 12, 9)

    blocked = r.resolve(nxt, [cand(ev("other", Grade.SOLEMNITY), nxt)], [sol])
    assert blocked.landed is None
    assert blocked.carried == (sol,)

    res = r.resolve(nxt, [cand(ev("w", Grade.WEEKDAY), nxt), cand(ev("om", Grade.MEMORIAL_OPT), nxt)], [sol])
    assert res.landed == sol
    assert res.carried == ()
    out = outcomes(res)
    assert out["ImmaculateConception"] == Outcome.TRANSFERRED_TO
    assert out["w"] == Outcome.SUPPRESSED
    assert out["om"] == Outcome.SUPPRESSED

def test_non_transferable_high_grade_is_suppressed():
    r = PrecedenceResolver()
    res = r.resolve(D, [cand(ev("a", Grade.HIGHER_SOLEMNITY)), cand(ev("b", Grade.SOLEMNITY, must_celebrate=False))])
    assert outcomes(res)["b"] == Outcome.SUPPRESSED

def test_sort_key_is_total():
    r = PrecedenceResolver()
    cs = [cand(ev(k, Grade.MEMORIAL)) for k in ("c", "a", "b")]
    assert [c.event_key for c in r.rank(cs)] == ["a", "b", "c"]
