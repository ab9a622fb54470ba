"""
Latvian.

"viens" is dropped before a scale word ("tūkstotis", "miljons") and the
hundred has three forms:

    100, 110-199   simts
    101-109        simtu viens ... simtu deviņi
    200-999        divi simti ...

Ordinals: 101 -> "simts pirmais", 2000 -> "divi tūkstoši tūkstošais".
"""

from __future__ import annotations

from ..inflected import InflectedProfile, OrdinalForms
from ..language import Language
from ..models import GenderedOptions
from ..plurals import TWO_FORM

ONES = ("", "viens", "divi", "trīs", "četri", "pieci", "seši", "septiņi", "astoņi", "deviņi")


def hundreds_words(hundreds: int, value: int) -> list[str]:
    if hundreds > 1:
        return [ONES[hundreds], "simti"]
    tens, ones = (value // 10) % 10, value % 10
    if tens == 0 and ones > 0:
        return ["simtu"]
    return ["simts"]


PROFILE = InflectedProfile(
    ones=ONES,
    ones_feminine=("", "viena", "divas", "trīs", "četras", "piecas", "sešas", "septiņas", "astoņas", "deviņas"),
    teens=(
        "desmit", "vienpadsmit", "divpadsmit", "trīspadsmit", "četrpadsmit",
        "piecpadsmit", "sešpadsmit", "septiņpadsmit", "astoņpadsmit", "deviņpadsmit",
    ),
    tens=(
        "", "desmit", "divdesmit", "trīsdesmit", "četrdesmit",
        "piecdesmit", "sešdesmit", "septiņdesmit", "astoņdesmit", "deviņdesmit",
    ),
    hundreds=("",) + tuple(f"{ONES[h]} simti" for h in range(1, 10)),
    scale_forms=(
        ("tūkstotis", "tūkstoši", "tūkstošu"),
        ("miljons", "miljoni", "miljonu"),
        ("miljards", "miljardi", "miljardu"),
        ("triljons", "triljoni", "triljonu"),
        ("kvadriljons", "kvadriljoni", "kvadriljonu"),
        ("kvintiljons", "kvintiljoni", "kvintiljonu"),
    ),
    omit_one_before_scale=True,
    plural_rule=TWO_FORM,
    feminine_limit=1000,
    hundreds_hook=hundreds_words,
    ordinals=OrdinalForms(
        ones=("", "pirmais", "otrais", "trešais", "ceturtais", "piektais", "sestais", "septītais", "astotais", "devītais"),
        teens=(
            "desmitais", "vienpadsmitais", "divpadsmitais", "trīspadsmitais", "četrpadsmitais",
            "piecpadsmitais", "sešpadsmitais", "septiņpadsmitais", "astoņpadsmitais", "deviņpadsmitais",
        ),
        tens=(
            "", "desmitais", "divdesmitais", "trīsdesmitais", "četrdesmitais",
            "piecdesmitais", "sešdesmitais", "septiņdesmitais", "astoņdesmitais", "deviņdesmitais",
        ),
        hundreds=(
            "", "simtais", "divsimtais", "trīssimtais", "četrsimtais",
            "piecsimtais", "sešsimtais", "septiņsimtais", "astoņsimtais", "deviņsimtais",
        ),
        scales=("tūkstošais", "miljonais", "miljardais", "triljonais"),
        repeat_scale=True,
    ),
)

LATVIAN = Language(
    code="lv",
    name="Latvian",
    engine=PROFILE,
    zero_word="nulle",
    negative_word="mīnus",
    decimal_word="komats",
    options_model=GenderedOptions,
    ordinal=PROFILE.to_ordinal,
    ordinal_max_digits=PROFILE.ordinal_max_digits,
)
