"""
Lithuanian. "vienas" is always spoken ("vienas šimtas", "vienas tūkstantis");
feminine units apply only to numbers below one thousand.

A multiplied final scale keeps its cardinal word in ordinals:
2000 -> "du tūkstančiai tūkstantasis".
"""

from __future__ import annotations

from ..inflected import InflectedProfile, OrdinalForms
from ..language import Language
from ..models import GenderedOptions
from ..plurals import GENITIVE

ONES = ("", "vienas", "du", "trys", "keturi", "penki", "šeši", "septyni", "aštuoni", "devyni")
# genitive plural, as in "dviejų šimtasis"
GENITIVE_ONES = ("", "", "dviejų", "trijų", "keturių", "penkių", "šešių", "septynių", "aštuonių", "devynių")

PROFILE = InflectedProfile(
    ones=ONES,
    ones_feminine=("", "viena", "dvi", "trys", "keturios", "penkios", "šešios", "septynios", "aštuonios", "devynios"),
    teens=(
        "dešimt", "vienuolika", "dvylika", "trylika", "keturiolika",
        "penkiolika", "šešiolika", "septyniolika", "aštuoniolika", "devyniolika",
    ),
    tens=(
        "", "dešimt", "dvidešimt", "trisdešimt", "keturiasdešimt",
        "penkiasdešimt", "šešiasdešimt", "septyniasdešimt", "aštuoniasdešimt", "devyniasdešimt",
    ),
    hundreds=("",) + tuple(
        f"{ONES[h]} {'šimtas' if h == 1 else 'šimtai'}" for h in range(1, 10)
    ),
    scale_forms=(
        ("tūkstantis", "tūkstančiai", "tūkstančių"),
        ("milijonas", "milijonai", "milijonų"),
        ("milijardas", "milijardai", "milijardų"),
        ("trilijonas", "trilijonai", "trilijonų"),
        ("kvadrilijonas", "kvadrilijonai", "kvadrilijonų"),
        ("kvintilijonas", "kvintilijonai", "kvintilijonų"),
    ),
    plural_rule=GENITIVE,
    feminine_limit=1000,
    ordinals=OrdinalForms(
        ones=("", "pirmas", "antras", "trečias", "ketvirtas", "penktas", "šeštas", "septintas", "aštuntas", "devintas"),
        teens=(
            "dešimtas", "vienuoliktas", "dvyliktas", "tryliktas", "keturioliktas",
            "penkioliktas", "šešioliktas", "septynioliktas", "aštuonioliktas", "devynioliktas",
        ),
        tens=(
            "", "dešimtas", "dvidešimtas", "trisdešimtas", "keturiasdešimtas",
            "penkiasdešimtas", "šešiasdešimtas", "septyniasdešimtas", "aštuoniasdešimtas", "devyniasdešimtas",
        ),
        hundreds=("", "šimtasis") + tuple(f"{GENITIVE_ONES[h]} šimtasis" for h in range(2, 10)),
        scales=("tūkstantasis", "milijonasis", "milijardasis", "trilijonasis"),
        repeat_scale=True,
    ),
)

LITHUANIAN = Language(
    code="lt",
    name="Lithuanian",
    engine=PROFILE,
    zero_word="nulis",
    negative_word="minus",
    decimal_word="kablelis",
    options_model=GenderedOptions,
    ordinal=PROFILE.to_ordinal,
    ordinal_max_digits=PROFILE.ordinal_max_digits,
)
