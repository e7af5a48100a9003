"""
litcal.catalogs.overlays
------------------------
Sample particular calendars layered over the General Roman Calendar:
two national calendars, one diocese and one wider region.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..core.types import (
    Color,
    DateRule,
    EasterOffset,
    EventCatalog,
    FixedDate,
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    LiturgicalEvent,
    Precedence,
)


def particular(
    jurisdiction: Jurisdiction,
    key: str,
    rule: DateRule,
    grade: Grade,
    names: Dict[str, str],
    *,
    color: Tuple[Color, ...] = (Color.WHITE,),
    overrides: bool = False,
    precedence: Optional[Precedence] = None,
    since: Optional[int] = None,
    temporale: bool = False,
) -> LiturgicalEvent:
    return LiturgicalEvent(
        event_key=key,
        date_rule=rule,
        grade=grade,
        color=color,
        jurisdiction=jurisdiction,
        since_year=since,
        i18n=dict(names),
        overrides=overrides,
        precedence=precedence,
        temporale=temporale,
    )


# ============================================================
# NATIONAL: Italy
# ============================================================

IT = Jurisdiction(JurisdictionLevel.NATIONAL, "IT")

NATIONAL_IT = EventCatalog(
    name="Calendario Romano Generale per l'Italia",
    jurisdiction=IT,
    events=(
        particular(IT, "StCatherineSiena", FixedDate(4, 29), Grade.FEAST, {
            "en": "Saint Catherine of Siena, virgin and doctor, patroness of Italy",
            "it": "Santa Caterina da Siena, vergine e dottore della Chiesa, patrona d'Italia",
            "la": "S. Catharinæ Senensis, virginis et Ecclesiæ doctoris, Italiæ patronæ",
        }, overrides=True),
        particular(IT, "StFrancisAssisi", FixedDate(10, 4), Grade.FEAST, {
            "en": "Saint Francis of Assisi, patron of Italy",
            "it": "San Francesco d'Assisi, patrono d'Italia",
            "la": "S. Francisci Assisiensis, Italiæ patroni",
        }, overrides=True),
    ),
)


# ============================================================
# NATIONAL: United States
# ============================================================

US = Jurisdiction(JurisdictionLevel.NATIONAL, "US")

NATIONAL_US = EventCatalog(
    name="Proper Calendar for the Dioceses of the United States",
    jurisdiction=US,
    epiphany_on_sunday=True,
    events=(
        # Holy days transferred to Sunday
        particular(US, "Ascension", EasterOffset(42), Grade.HIGHER_SOLEMNITY, {
            "en": "Ascension of the Lord", "la": "In Ascensione Domini",
        }, overrides=True, precedence=Precedence.PRIVILEGED_DAY, temporale=True),
        particular(US, "CorpusChristi", EasterOffset(63), Grade.SOLEMNITY, {
            "en": "Most Holy Body and Blood of Christ", "la": "Sanctissimi Corporis et Sanguinis Christi",
        }, overrides=True, precedence=Precedence.GENERAL_SOLEMNITY, temporale=True),
        # Proper celebrations
        particular(US, "StElizabethAnnSeton", FixedDate(1, 4), Grade.MEMORIAL, {
            "en": "Saint Elizabeth Ann Seton, religious", "la": "S. Elisabeth Annæ Seton, religiosæ",
        }),
        particular(US, "StJohnNeumann", FixedDate(1, 5), Grade.MEMORIAL, {
            "en": "Saint John Neumann, bishop", "la": "S. Ioannis Nepomuceni Neumann, episcopi",
        }),
        particular(US, "StKatharineDrexel", FixedDate(3, 3), Grade.MEMORIAL_OPT, {
            "en": "Saint Katharine Drexel, virgin", "la": "S. Catharinæ Drexel, virginis",
        }),
        particular(US, "StDamienMolokai", FixedDate(5, 10), Grade.MEMORIAL_OPT, {
            "en": "Saint Damien de Veuster, priest", "la": "S. Damiani de Veuster, presbyteri",
        }),
        particular(US, "StKateriTekakwitha", FixedDate(7, 14), Grade.MEMORIAL, {
            "en": "Saint Kateri Tekakwitha, virgin", "la": "S. Catharinæ Tekakwitha, virginis",
        }),
        particular(US, "StFrancesXavierCabrini", FixedDate(11, 13), Grade.MEMORIAL, {
            "en": "Saint Frances Xavier Cabrini, virgin", "la": "S. Franciscæ Xaverii Cabrini, virginis",
        }),
        particular(US, "LadyGuadalupe", FixedDate(12, 12), Grade.FEAST, {
            "en": "Our Lady of Guadalupe", "la": "Beatæ Mariæ Virginis Guadalupensis",
        }, overrides=True),
    ),
)


# ============================================================
# DIOCESAN: Rome
# ============================================================

ROME = Jurisdiction(JurisdictionLevel.DIOCESAN, "ROME")

DIOCESAN_ROME = EventCatalog(
    name="Calendario proprio della Diocesi di Roma",
    jurisdiction=ROME,
    parent="IT",
    events=(
        particular(ROME, "StFrancesRome", FixedDate(3, 9), Grade.FEAST, {
            "en": "Saint Frances of Rome, religious, patroness of Rome",
            "it": "Santa Francesca Romana, religiosa, compatrona di Roma",
            "la": "S. Franciscæ Romanæ, religiosæ",
        }, overrides=True),
        particular(ROME, "StPhilipNeri", FixedDate(5, 26), Grade.FEAST, {
            "en": "Saint Philip Neri, priest, patron of Rome",
            "it": "San Filippo Neri, sacerdote, compatrono di Roma",
            "la": "S. Philippi Neri, presbyteri",
        }, overrides=True),
        particular(ROME, "DedicationLateran", FixedDate(11, 9), Grade.SOLEMNITY, {
            "en": "Dedication of the Cathedral of Rome",
            "it": "Dedicazione della Basilica Cattedrale di Roma",
            "la": "In Dedicatione Basilicæ Lateranensis",
        }, overrides=True),
    ),
)


# ============================================================
# WIDER REGION: Europe
# ============================================================

EUROPE = Jurisdiction(JurisdictionLevel.WIDER_REGION, "EUROPE")

WIDER_REGION_EUROPE = EventCatalog(
    name="Patrons of Europe",
    jurisdiction=EUROPE,
    members=frozenset({
        "AT", "BE", "CZ", "DE", "ES", "FR", "HR", "HU", "IE", "IT", "LT", "MT",
        "NL", "PL", "PT", "SI", "SK",
    }),
    events=(
        particular(EUROPE, "StsCyrilMethodius", FixedDate(2, 14), Grade.FEAST, {
            "en": "Saints Cyril, monk, and Methodius, bishop, patrons of Europe",
            "it": "Santi Cirillo e Metodio, patroni d'Europa",
            "la": "Ss. Cyrilli, monachi, et Methodii, episcopi, Europæ patronorum",
        }, overrides=True),
        particular(EUROPE, "StCatherineSiena", FixedDate(4, 29), Grade.FEAST, {
            "en": "Saint Catherine of Siena, virgin and doctor, patroness of Europe",
            "it": "Santa Caterina da Siena, patrona d'Europa",
            "la": "S. Catharinæ Senensis, virginis et Ecclesiæ doctoris, Europæ patronæ",
        }, overrides=True, since=1999),
        particular(EUROPE, "StBenedict", FixedDate(7, 11), Grade.FEAST, {
            "en": "Saint Benedict, abbot, patron of Europe",
            "it": "San Benedetto, abate, patrono d'Europa",
            "la": "S. Benedicti, abbatis, Europæ patroni",
        }, overrides=True),
        particular(EUROPE, "StBridget", FixedDate(7, 23), Grade.FEAST, {
            "en": "Saint Bridget, religious, patroness of Europe",
            "it": "Santa Brigida, religiosa, patrona d'Europa",
            "la": "S. Birgittæ, religiosæ, Europæ patronæ",
        }, overrides=True, since=1999),
        particular(EUROPE, "StTeresaBenedictaCross", FixedDate(8, 9), Grade.FEAST, {
            "en": "Saint Teresa Benedicta of the Cross, virgin and martyr, patroness of Europe",
            "it": "Santa Teresa Benedetta della Croce, patrona d'Europa",
            "la": "S. Teresiæ Benedictæ a Cruce, virginis et martyris, Europæ patronæ",
        }, color=(Color.RED,), overrides=True, since=1999),
    ),
)
