"""
litcal.catalogs.general
-----------------------
The General Roman Calendar: proper of time (temporale) and the universal
celebrations of saints (sanctorale).

Ferial weekdays and numbered Sundays carry no literal names; their keys are
built from the key-shape classes so the name generator can always parse them.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.errors import ConfigurationError
from ..core.types import (
    UNIVERSAL,
    AnchorOffset,
    Color,
    DateRule,
    EasterOffset,
    EventCatalog,
    FixedDate,
    Grade,
    LitSeason,
    LiturgicalEvent,
    Precedence,
    SeasonDate,
    SeasonWeekday,
)
from ..engines.ferial_names import (
    DayAfterKey,
    HolyWeekKey,
    OctaveDayKey,
    SeasonDateKey,
    SeasonSundayKey,
    SeasonWeekdayKey,
    key_pattern,
)

W, R, G, P, ROSE, B = Color.WHITE, Color.RED, Color.GREEN, Color.PURPLE, Color.ROSE, Color.BLACK

SEASON_COLORS = {
    LitSeason.ADVENT: (P,),
    LitSeason.CHRISTMAS: (W,),
    LitSeason.LENT: (P,),
    LitSeason.EASTER: (W,),
    LitSeason.ORDINARY_TIME: (G,),
}


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def proper(
    key: str,
    rule: DateRule,
    grade: Grade,
    en: str,
    la: str,
    it: Optional[str] = None,
    *,
    color: Tuple[Color, ...] = (W,),
    common: Tuple[str, ...] = (),
    since: Optional[int] = None,
    until: Optional[int] = None,
    precedence: Optional[Precedence] = None,
    must_celebrate: Optional[bool] = None,
    temporale: bool = False,
) -> LiturgicalEvent:
    """An event with literal names."""
    i18n = {"en": en, "la": la}
    if it is not None:
        i18n["it"] = it
    return LiturgicalEvent(
        event_key=key,
        date_rule=rule,
        grade=grade,
        color=color,
        jurisdiction=UNIVERSAL,
        common=common,
        since_year=since,
        until_year=until,
        i18n=i18n,
        precedence=precedence,
        must_celebrate=must_celebrate,
        temporale=temporale,
    )


def ferial(
    key: str,
    rule: DateRule,
    *,
    grade: Grade = Grade.WEEKDAY,
    color: Tuple[Color, ...],
    precedence: Precedence = Precedence.WEEKDAY,
) -> LiturgicalEvent:
    """A procedurally named temporale event; it never transfers."""
    pattern = key_pattern(key)
    if pattern is None:
        raise ConfigurationError(f"'{key}' is not a ferial event key")
    return LiturgicalEvent(
        event_key=key,
        date_rule=rule,
        grade=grade,
        color=color,
        jurisdiction=UNIVERSAL,
        name_pattern=pattern,
        precedence=precedence,
        must_celebrate=False,
        temporale=True,
    )


def _sundays() -> List[LiturgicalEvent]:
    out = []
    privileged = ((LitSeason.ADVENT, range(1, 5)), (LitSeason.LENT, range(1, 6)), (LitSeason.EASTER, range(2, 8)))
    for season, weeks in privileged:
        for w in weeks:
            color = SEASON_COLORS[season]
            if (season, w) in ((LitSeason.ADVENT, 3), (LitSeason.LENT, 4)):
                color = (ROSE, P)
            out.append(ferial(
                SeasonSundayKey(season, w).event_key,
                SeasonWeekday(season, w, 0),
                grade=Grade.HIGHER_SOLEMNITY,
                color=color,
                precedence=Precedence.PRIVILEGED_DAY,
            ))
    for w in range(2, 34):
        out.append(ferial(
            SeasonSundayKey(LitSeason.ORDINARY_TIME, w).event_key,
            SeasonWeekday(LitSeason.ORDINARY_TIME, w, 0),
            grade=Grade.FEAST_LORD,
            color=(G,),
            precedence=Precedence.SUNDAY,
        ))
    return out


def _weekdays() -> List[LiturgicalEvent]:
    out = []
    numbered = (
        (LitSeason.ADVENT, range(1, 4), Precedence.WEEKDAY),
        (LitSeason.LENT, range(1, 6), Precedence.PRIVILEGED_WEEKDAY),
        (LitSeason.EASTER, range(2, 8), Precedence.WEEKDAY),
        (LitSeason.ORDINARY_TIME, range(1, 35), Precedence.WEEKDAY),
    )
    for season, weeks, prec in numbered:
        for w in weeks:
            for wd in range(1, 7):
                out.append(ferial(
                    SeasonWeekdayKey(season, w, wd).event_key,
                    SeasonWeekday(season, w, wd),
                    color=SEASON_COLORS[season],
                    precedence=prec,
                ))

    for day in range(17, 25):
        out.append(ferial(
            SeasonDateKey(LitSeason.ADVENT, 12, day).event_key,
            SeasonDate(LitSeason.ADVENT, 12, day),
            color=(P,),
            precedence=Precedence.PRIVILEGED_WEEKDAY,
        ))
    for day in range(2, 8):
        out.append(ferial(
            OctaveDayKey(LitSeason.CHRISTMAS, day).event_key,
            SeasonDate(LitSeason.CHRISTMAS, 12, day + 24),
            color=(W,),
            precedence=Precedence.PRIVILEGED_WEEKDAY,
        ))
    # Weekdays before Epiphany; Jan 6 and 7 only occur where Epiphany moves to Sunday
    for day in range(2, 8):
        out.append(ferial(
            SeasonDateKey(LitSeason.CHRISTMAS, 1, day).event_key,
            SeasonDate(LitSeason.CHRISTMAS, 1, day),
            color=(W,),
        ))
    for day in range(7, 13):
        out.append(ferial(
            SeasonDateKey(LitSeason.CHRISTMAS, 1, day, after_epiphany=True).event_key,
            SeasonDate(LitSeason.CHRISTMAS, 1, day, after_epiphany=True),
            color=(W,),
        ))
    # Monday..Saturday after an Epiphany kept on Sunday
    for wd in range(1, 7):
        out.append(ferial(
            DayAfterKey("Epiphany", wd).event_key,
            SeasonWeekday(LitSeason.CHRISTMAS, 1, wd),
            color=(W,),
        ))

    # Thursday..Saturday after Ash Wednesday
    for wd, offset in ((4, -45), (5, -44), (6, -43)):
        out.append(ferial(
            DayAfterKey("AshWednesday", wd).event_key,
            EasterOffset(offset),
            color=(P,),
            precedence=Precedence.PRIVILEGED_WEEKDAY,
        ))
    # Monday..Wednesday of Holy Week
    for wd in range(1, 4):
        out.append(ferial(
            HolyWeekKey(wd).event_key,
            EasterOffset(wd - 7),
            grade=Grade.HIGHER_SOLEMNITY,
            color=(P,),
            precedence=Precedence.PRIVILEGED_DAY,
        ))
    # Monday..Saturday within the Octave of Easter
    for day in range(2, 8):
        out.append(ferial(
            OctaveDayKey(LitSeason.EASTER, day).event_key,
            EasterOffset(day - 1),
            grade=Grade.HIGHER_SOLEMNITY,
            color=(W,),
            precedence=Precedence.PRIVILEGED_DAY,
        ))
    return out


# ============================================================
# PROPER OF TIME
# ============================================================

HS, S, FL, F, M, OM = (
    Grade.HIGHER_SOLEMNITY, Grade.SOLEMNITY, Grade.FEAST_LORD, Grade.FEAST, Grade.MEMORIAL, Grade.MEMORIAL_OPT,
)

TEMPORALE: Tuple[LiturgicalEvent, ...] = (
    proper("Christmas", FixedDate(12, 25), HS,
           "Nativity of the Lord", "In Nativitate Domini", "Natale del Signore",
           precedence=Precedence.PRIVILEGED_DAY, temporale=True),
    proper("HolyFamily", AnchorOffset("holy_family"), FL,
           "Holy Family of Jesus, Mary and Joseph", "Sanctæ Familiæ Iesu, Mariæ et Ioseph",
           "Santa Famiglia di Gesù, Maria e Giuseppe", temporale=True),
    proper("MotherGod", FixedDate(1, 1), S,
           "Mary, Mother of God", "Sanctæ Dei Genetricis Mariæ", "Maria Santissima Madre di Dio",
           temporale=True),
    proper("Christmas2", AnchorOffset("christmas2"), FL,
           "Second Sunday after Christmas", "Dominica II post Nativitatem", "II Domenica dopo Natale",
           precedence=Precedence.SUNDAY, must_celebrate=False, temporale=True),
    proper("Epiphany", AnchorOffset("epiphany"), HS,
           "Epiphany of the Lord", "In Epiphania Domini", "Epifania del Signore",
           precedence=Precedence.PRIVILEGED_DAY, temporale=True),
    proper("BaptismLord", AnchorOffset("baptism"), FL,
           "Baptism of the Lord", "In Baptismate Domini", "Battesimo del Signore", temporale=True),
    proper("AshWednesday", EasterOffset(-46), HS,
           "Ash Wednesday", "Feria IV Cinerum", "Mercoledì delle Ceneri",
           color=(P,), precedence=Precedence.PRIVILEGED_DAY, must_celebrate=False, temporale=True),
    proper("PalmSun", EasterOffset(-7), HS,
           "Palm Sunday of the Passion of the Lord", "Dominica in Palmis de Passione Domini",
           "Domenica delle Palme nella Passione del Signore",
           color=(R,), precedence=Precedence.PRIVILEGED_DAY, must_celebrate=False, temporale=True),
    proper("HolyThurs", EasterOffset(-3), HS,
           "Holy Thursday", "Feria V in Cena Domini", "Giovedì Santo",
           precedence=Precedence.TRIDUUM, must_celebrate=False, temporale=True),
    proper("GoodFri", EasterOffset(-2), HS,
           "Good Friday of the Passion of the Lord", "Feria VI in Passione Domini", "Venerdì Santo",
           color=(R,), precedence=Precedence.TRIDUUM, must_celebrate=False, temporale=True),
    proper("EasterVigil", EasterOffset(-1), HS,
           "Easter Vigil", "Vigilia Paschalis", "Veglia Pasquale",
           precedence=Precedence.TRIDUUM, must_celebrate=False, temporale=True),
    proper("Easter", EasterOffset(0), HS,
           "Easter Sunday of the Resurrection of the Lord", "Dominica Paschæ in Resurrectione Domini",
           "Domenica di Pasqua", precedence=Precedence.TRIDUUM, must_celebrate=False, temporale=True),
    proper("Ascension", EasterOffset(39), HS,
           "Ascension of the Lord", "In Ascensione Domini", "Ascensione del Signore",
           precedence=Precedence.PRIVILEGED_DAY, temporale=True),
    proper("Pentecost", EasterOffset(49), HS,
           "Pentecost Sunday", "Dominica Pentecostes", "Domenica di Pentecoste",
           color=(R,), precedence=Precedence.PRIVILEGED_DAY, must_celebrate=False, temporale=True),
    proper("MaryMotherChurch", EasterOffset(50), M,
           "Blessed Virgin Mary, Mother of the Church", "Beatæ Mariæ Virginis, Ecclesiæ Matris",
           "Beata Vergine Maria Madre della Chiesa", since=2018, temporale=True),
    proper("Trinity", EasterOffset(56), S,
           "Most Holy Trinity", "Sanctissimæ Trinitatis", "Santissima Trinità", temporale=True),
    proper("CorpusChristi", EasterOffset(60), S,
           "Most Holy Body and Blood of Christ", "Sanctissimi Corporis et Sanguinis Christi",
           "Santissimo Corpo e Sangue di Cristo", temporale=True),
    proper("SacredHeart", EasterOffset(68), S,
           "Most Sacred Heart of Jesus", "Sacratissimi Cordis Iesu", "Sacratissimo Cuore di Gesù",
           temporale=True),
    proper("ImmaculateHeart", EasterOffset(69), M,
           "Immaculate Heart of the Blessed Virgin Mary", "Immaculati Cordis Beatæ Mariæ Virginis",
           "Cuore Immacolato della Beata Vergine Maria", temporale=True),
    proper("ChristKing", AnchorOffset("christ_king"), S,
           "Our Lord Jesus Christ, King of the Universe", "Domini Nostri Iesu Christi Universorum Regis",
           "Nostro Signore Gesù Cristo Re dell'Universo", temporale=True),
) + tuple(_sundays()) + tuple(_weekdays())


# ============================================================
# PROPER OF SAINTS
# ============================================================

MARTYRS = ("Martyrs",)
PASTORS = ("Pastors",)
DOCTORS = ("Doctors",)
VIRGINS = ("Virgins",)
BVM = ("Blessed Virgin Mary",)
APOSTLES = ("Apostles",)

SANCTORALE: Tuple[LiturgicalEvent, ...] = (
    # January
    proper("StsBasilGreg", FixedDate(1, 2), M,
           "Saints Basil the Great and Gregory Nazianzen, bishops and doctors",
           "Ss. Basilii Magni et Gregorii Nazianzeni, episcoporum et Ecclesiæ doctorum", common=DOCTORS),
    proper("NameJesus", FixedDate(1, 3), OM, "Most Holy Name of Jesus", "Sanctissimi Nominis Iesu"),
    proper("StAnthonyAbbot", FixedDate(1, 17), M, "Saint Anthony, abbot", "S. Antonii, abbatis"),
    proper("StAgnes", FixedDate(1, 21), M, "Saint Agnes, virgin and martyr", "S. Agnetis, virginis et martyris",
           color=(R,), common=MARTYRS),
    proper("StFrancisDeSales", FixedDate(1, 24), M,
           "Saint Francis de Sales, bishop and doctor", "S. Francisci de Sales, episcopi et Ecclesiæ doctoris",
           common=DOCTORS),
    proper("ConversionStPaul", FixedDate(1, 25), F,
           "Conversion of Saint Paul, apostle", "In Conversione S. Pauli, Apostoli",
           "Conversione di San Paolo, apostolo", common=APOSTLES),
    proper("StsTimothyTitus", FixedDate(1, 26), M,
           "Saints Timothy and Titus, bishops", "Ss. Timothei et Titi, episcoporum", common=PASTORS),
    proper("StThomasAquinas", FixedDate(1, 28), M,
           "Saint Thomas Aquinas, priest and doctor", "S. Thomæ de Aquino, presbyteri et Ecclesiæ doctoris",
           common=DOCTORS),
    proper("StJohnBosco", FixedDate(1, 31), M, "Saint John Bosco, priest", "S. Ioannis Bosco, presbyteri",
           common=PASTORS),
    # February
    proper("Presentation", FixedDate(2, 2), FL,
           "Presentation of the Lord", "In Præsentatione Domini", "Presentazione del Signore"),
    proper("StBlase", FixedDate(2, 3), OM, "Saint Blaise, bishop and martyr", "S. Blasii, episcopi et martyris",
           color=(R,), common=MARTYRS),
    proper("StAgatha", FixedDate(2, 5), M, "Saint Agatha, virgin and martyr", "S. Agathæ, virginis et martyris",
           color=(R,), common=MARTYRS),
    proper("StScholastica", FixedDate(2, 10), M, "Saint Scholastica, virgin", "S. Scholasticæ, virginis",
           common=VIRGINS),
    proper("LadyLourdes", FixedDate(2, 11), OM,
           "Our Lady of Lourdes", "Beatæ Mariæ Virginis de Lourdes", common=BVM),
    proper("StsCyrilMethodius", FixedDate(2, 14), M,
           "Saints Cyril, monk, and Methodius, bishop", "Ss. Cyrilli, monachi, et Methodii, episcopi",
           "Santi Cirillo e Metodio", common=PASTORS),
    proper("ChairStPeter", FixedDate(2, 22), F,
           "Chair of Saint Peter, apostle", "Cathedræ S. Petri, Apostoli", "Cattedra di San Pietro, apostolo",
           common=APOSTLES),
    # March
    proper("StsPerpetuaFelicity", FixedDate(3, 7), M,
           "Saints Perpetua and Felicity, martyrs", "Ss. Perpetuæ et Felicitatis, martyrum",
           color=(R,), common=MARTYRS),
    proper("StFrancesRome", FixedDate(3, 9), OM, "Saint Frances of Rome, religious", "S. Franciscæ Romanæ, religiosæ",
           "Santa Francesca Romana, religiosa"),
    proper("StPatrick", FixedDate(3, 17), OM, "Saint Patrick, bishop", "S. Patricii, episcopi", common=PASTORS),
    proper("StJoseph", FixedDate(3, 19), S,
           "Saint Joseph, Spouse of the Blessed Virgin Mary", "S. Ioseph, Sponsi Beatæ Mariæ Virginis",
           "San Giuseppe, sposo della Beata Vergine Maria"),
    proper("Annunciation", FixedDate(3, 25), S,
           "Annunciation of the Lord", "In Annuntiatione Domini", "Annunciazione del Signore"),
    # April
    proper("StMarkEvangelist", FixedDate(4, 25), F,
           "Saint Mark, evangelist", "S. Marci, Evangelistæ", "San Marco, evangelista", color=(R,)),
    proper("StCatherineSiena", FixedDate(4, 29), M,
           "Saint Catherine of Siena, virgin and doctor", "S. Catharinæ Senensis, virginis et Ecclesiæ doctoris",
           "Santa Caterina da Siena, vergine e dottore della Chiesa", common=VIRGINS + DOCTORS),
    # May
    proper("StJosephWorker", FixedDate(5, 1), OM, "Saint Joseph the Worker", "S. Ioseph Opificis"),
    proper("StAthanasius", FixedDate(5, 2), M,
           "Saint Athanasius, bishop and doctor", "S. Athanasii, episcopi et Ecclesiæ doctoris", common=DOCTORS),
    proper("StsPhilipJames", FixedDate(5, 3), F,
           "Saints Philip and James, apostles", "Ss. Philippi et Iacobi, Apostolorum",
           "Santi Filippo e Giacomo, apostoli", color=(R,), common=APOSTLES),
    proper("StMatthiasAp", FixedDate(5, 14), F,
           "Saint Matthias, apostle", "S. Matthiæ, Apostoli", "San Mattia, apostolo", color=(R,), common=APOSTLES),
    proper("StPhilipNeri", FixedDate(5, 26), M, "Saint Philip Neri, priest", "S. Philippi Neri, presbyteri",
           "San Filippo Neri, sacerdote", common=PASTORS),
    proper("Visitation", FixedDate(5, 31), F,
           "Visitation of the Blessed Virgin Mary", "In Visitatione Beatæ Mariæ Virginis",
           "Visitazione della Beata Vergine Maria", common=BVM),
    # June
    proper("StJustinMartyr", FixedDate(6, 1), M, "Saint Justin, martyr", "S. Iustini, martyris",
           color=(R,), common=MARTYRS),
    proper("StBarnabasAp", FixedDate(6, 11), M, "Saint Barnabas, apostle", "S. Barnabæ, Apostoli",
           color=(R,), common=APOSTLES),
    proper("StAnthonyPadua", FixedDate(6, 13), M,
           "Saint Anthony of Padua, priest and doctor", "S. Antonii de Padova, presbyteri et Ecclesiæ doctoris",
           "Sant'Antonio di Padova, sacerdote e dottore della Chiesa", common=DOCTORS),
    proper("NativityJohnBaptist", FixedDate(6, 24), S,
           "Nativity of Saint John the Baptist", "In Nativitate S. Ioannis Baptistæ",
           "Natività di San Giovanni Battista"),
    proper("StIrenaeus", FixedDate(6, 28), M,
           "Saint Irenaeus, bishop, martyr and doctor", "S. Irenæi, episcopi, martyris et Ecclesiæ doctoris",
           color=(R,), common=MARTYRS),
    proper("StsPeterPaulAp", FixedDate(6, 29), S,
           "Saints Peter and Paul, apostles", "Ss. Petri et Pauli, Apostolorum", "Santi Pietro e Paolo, apostoli",
           color=(R,)),
    # July
    proper("StThomasAp", FixedDate(7, 3), F, "Saint Thomas, apostle", "S. Thomæ, Apostoli", "San Tommaso, apostolo",
           color=(R,), common=APOSTLES),
    proper("StBenedict", FixedDate(7, 11), M, "Saint Benedict, abbot", "S. Benedicti, abbatis",
           "San Benedetto, abate"),
    proper("StMaryMagdalene", FixedDate(7, 22), M, "Saint Mary Magdalene", "S. Mariæ Magdalenæ",
           "Santa Maria Maddalena", until=2015),
    proper("StMaryMagdalene", FixedDate(7, 22), F, "Saint Mary Magdalene", "S. Mariæ Magdalenæ",
           "Santa Maria Maddalena", since=2016),
    proper("StBridget", FixedDate(7, 23), OM, "Saint Bridget, religious", "S. Birgittæ, religiosæ",
           "Santa Brigida, religiosa"),
    proper("StJamesAp", FixedDate(7, 25), F, "Saint James, apostle", "S. Iacobi, Apostoli", "San Giacomo, apostolo",
           color=(R,), common=APOSTLES),
    proper("StsJoachimAnne", FixedDate(7, 26), M,
           "Saints Joachim and Anne, parents of the Blessed Virgin Mary",
           "Ss. Ioachim et Annæ, parentum Beatæ Mariæ Virginis"),
    proper("StMartha", FixedDate(7, 29), M, "Saint Martha", "S. Marthæ", until=2020),
    proper("StsMarthaMaryLazarus", FixedDate(7, 29), M,
           "Saints Martha, Mary and Lazarus", "Ss. Marthæ, Mariæ et Lazari", since=2021),
    proper("StIgnatiusLoyola", FixedDate(7, 31), M, "Saint Ignatius of Loyola, priest", "S. Ignatii de Loyola, presbyteri",
           common=PASTORS),
    # August
    proper("StJohnVianney", FixedDate(8, 4), M, "Saint John Vianney, priest", "S. Ioannis Mariæ Vianney, presbyteri",
           common=PASTORS),
    proper("Transfiguration", FixedDate(8, 6), FL,
           "Transfiguration of the Lord", "In Transfiguratione Domini", "Trasfigurazione del Signore"),
    proper("StTeresaBenedictaCross", FixedDate(8, 9), OM,
           "Saint Teresa Benedicta of the Cross, virgin and martyr", "S. Teresiæ Benedictæ a Cruce, virginis et martyris",
           "Santa Teresa Benedetta della Croce, vergine e martire", color=(R,), common=MARTYRS),
    proper("StLawrenceDeacon", FixedDate(8, 10), F,
           "Saint Lawrence, deacon and martyr", "S. Laurentii, diaconi et martyris", "San Lorenzo, diacono e martire",
           color=(R,), common=MARTYRS),
    proper("StMaximilianKolbe", FixedDate(8, 14), M,
           "Saint Maximilian Kolbe, priest and martyr", "S. Maximiliani Mariæ Kolbe, presbyteri et martyris",
           color=(R,), common=MARTYRS),
    proper("Assumption", FixedDate(8, 15), S,
           "Assumption of the Blessed Virgin Mary", "In Assumptione Beatæ Mariæ Virginis",
           "Assunzione della Beata Vergine Maria"),
    proper("QueenshipMary", FixedDate(8, 22), M,
           "Queenship of Blessed Virgin Mary", "Beatæ Mariæ Virginis Reginæ", common=BVM),
    proper("StBartholomewAp", FixedDate(8, 24), F,
           "Saint Bartholomew, apostle", "S. Bartholomæi, Apostoli", "San Bartolomeo, apostolo",
           color=(R,), common=APOSTLES),
    proper("StMonica", FixedDate(8, 27), M, "Saint Monica", "S. Monicæ"),
    proper("StAugustineHippo", FixedDate(8, 28), M,
           "Saint Augustine of Hippo, bishop and doctor", "S. Augustini, episcopi et Ecclesiæ doctoris",
           common=DOCTORS),
    proper("BeheadingJohnBaptist", FixedDate(8, 29), M,
           "The Passion of Saint John the Baptist", "In Passione S. Ioannis Baptistæ", color=(R,), common=MARTYRS),
    # September
    proper("NativityVirginMary", FixedDate(9, 8), F,
           "Nativity of the Blessed Virgin Mary", "In Nativitate Beatæ Mariæ Virginis",
           "Natività della Beata Vergine Maria", common=BVM),
    proper("ExaltationCross", FixedDate(9, 14), FL,
           "Exaltation of the Holy Cross", "In Exaltatione Sanctæ Crucis", "Esaltazione della Santa Croce",
           color=(R,)),
    proper("LadySorrows", FixedDate(9, 15), M,
           "Our Lady of Sorrows", "Beatæ Mariæ Virginis Perdolentis", common=BVM),
    proper("StMatthewEvangelist", FixedDate(9, 21), F,
           "Saint Matthew the Evangelist, Apostle", "S. Matthæi, Apostoli et Evangelistæ",
           "San Matteo, apostolo ed evangelista", color=(R,), common=APOSTLES),
    proper("StsArchangels", FixedDate(9, 29), F,
           "Saints Michael, Gabriel and Raphael, Archangels", "Ss. Michaëlis, Gabrielis et Raphaëlis, Archangelorum",
           "Santi Michele, Gabriele e Raffaele, arcangeli"),
    proper("StJerome", FixedDate(9, 30), M,
           "Saint Jerome, priest and doctor", "S. Hieronymi, presbyteri et Ecclesiæ doctoris", common=DOCTORS),
    # October
    proper("StThereseChildJesus", FixedDate(10, 1), M,
           "Saint Thérèse of the Child Jesus, virgin and doctor", "S. Teresiæ a Iesu Infante, virginis et Ecclesiæ doctoris",
           common=VIRGINS + DOCTORS),
    proper("GuardianAngels", FixedDate(10, 2), M, "Holy Guardian Angels", "Ss. Angelorum Custodum"),
    proper("StFrancisAssisi", FixedDate(10, 4), M, "Saint Francis of Assisi", "S. Francisci Assisiensis",
           "San Francesco d'Assisi"),
    proper("LadyRosary", FixedDate(10, 7), M, "Our Lady of the Rosary", "Beatæ Mariæ Virginis a Rosario", common=BVM),
    proper("StTeresaJesus", FixedDate(10, 15), M,
           "Saint Teresa of Jesus, virgin and doctor", "S. Teresiæ a Iesu, virginis et Ecclesiæ doctoris",
           common=VIRGINS + DOCTORS),
    proper("StLukeEvangelist", FixedDate(10, 18), F,
           "Saint Luke the Evangelist", "S. Lucæ, Evangelistæ", "San Luca, evangelista", color=(R,)),
    proper("StSimonJudeAp", FixedDate(10, 28), F,
           "Saints Simon and Jude, apostles", "Ss. Simonis et Iudæ, Apostolorum", "Santi Simone e Giuda, apostoli",
           color=(R,), common=APOSTLES),
    # November
    proper("AllSaints", FixedDate(11, 1), S, "All Saints", "Omnium Sanctorum", "Tutti i Santi"),
    proper("AllSouls", FixedDate(11, 2), S,
           "Commemoration of all the Faithful Departed", "In Commemoratione Omnium Fidelium Defunctorum",
           "Commemorazione di tutti i fedeli defunti",
           color=(P, B), precedence=Precedence.GENERAL_SOLEMNITY, must_celebrate=False),
    proper("DedicationLateran", FixedDate(11, 9), FL,
           "Dedication of the Lateran basilica", "In Dedicatione Basilicæ Lateranensis",
           "Dedicazione della Basilica Lateranense"),
    proper("StMartinTours", FixedDate(11, 11), M, "Saint Martin of Tours, bishop", "S. Martini, episcopi",
           common=PASTORS),
    proper("PresentationMary", FixedDate(11, 21), M,
           "Presentation of the Blessed Virgin Mary", "In Præsentatione Beatæ Mariæ Virginis", common=BVM),
    proper("StCecilia", FixedDate(11, 22), M, "Saint Cecilia, virgin and martyr", "S. Cæciliæ, virginis et martyris",
           color=(R,), common=MARTYRS),
    proper("StAndrewAp", FixedDate(11, 30), F, "Saint Andrew, apostle", "S. Andreæ, Apostoli",
           "Sant'Andrea, apostolo", color=(R,), common=APOSTLES),
    # December
    proper("StFrancisXavier", FixedDate(12, 3), M, "Saint Francis Xavier, priest", "S. Francisci Xavier, presbyteri",
           common=PASTORS),
    proper("ImmaculateConception", FixedDate(12, 8), S,
           "Immaculate Conception of the Blessed Virgin Mary", "In Conceptione Immaculata Beatæ Mariæ Virginis",
           "Immacolata Concezione della Beata Vergine Maria"),
    proper("LadyGuadalupe", FixedDate(12, 12), OM, "Our Lady of Guadalupe", "Beatæ Mariæ Virginis Guadalupensis",
           common=BVM),
    proper("StLucySyracuse", FixedDate(12, 13), M, "Saint Lucy of Syracuse, virgin and martyr",
           "S. Luciæ, virginis et martyris", color=(R,), common=MARTYRS),
    proper("StJohnCross", FixedDate(12, 14), M,
           "Saint John of the Cross, priest and doctor", "S. Ioannis a Cruce, presbyteri et Ecclesiæ doctoris",
           common=DOCTORS),
    proper("StStephenProtomartyr", FixedDate(12, 26), F,
           "Saint Stephen, the first martyr", "S. Stephani, protomartyris", "Santo Stefano, primo martire",
           color=(R,), common=MARTYRS),
    proper("StJohnEvangelist", FixedDate(12, 27), F,
           "Saint John, Apostle and Evangelist", "S. Ioannis, Apostoli et Evangelistæ",
           "San Giovanni, apostolo ed evangelista", common=APOSTLES),
    proper("HolyInnocents", FixedDate(12, 28), F,
           "Holy Innocents, martyrs", "Ss. Innocentium, martyrum", "Santi Innocenti, martiri",
           color=(R,), common=MARTYRS),
    proper("StThomasBecket", FixedDate(12, 29), OM,
           "Saint Thomas Becket, bishop and martyr", "S. Thomæ Becket, episcopi et martyris",
           color=(R,), common=MARTYRS),
)


GENERAL_ROMAN = EventCatalog(
    name="General Roman Calendar",
    jurisdiction=UNIVERSAL,
    events=TEMPORALE + SANCTORALE,
)
