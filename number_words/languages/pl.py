"""
Polish. "jeden" is never spoken before a scale word ("tysiąc", "milion"),
and only the bare value 1 takes the singular ("dwadzieścia jeden tysięcy").
Feminine units apply only to numbers below one thousand.

Ordinals inflect the tens too: 21 -> "dwudziesty pierwszy".
"""

from __future__ import annotations

from ..inflected import InflectedProfile, OrdinalForms
from ..language import Language
from ..models import GenderedOptions
from ..plurals import POLISH

PROFILE = InflectedProfile(
    ones=("", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    ones_feminine=("", "jedna", "dwie", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    teens=(
        "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście",
        "piętnaście", "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
    ),
    tens=(
        "", "dziesięć", "dwadzieścia", "trzydzieści", "czterdzieści",
        "pięćdziesiąt", "sześćdziesiąt", "siedemdziesiąt", "osiemdziesiąt", "dziewięćdziesiąt",
    ),
    hundreds=(
        "", "sto", "dwieście", "trzysta", "czterysta",
        "pięćset", "sześćset", "siedemset", "osiemset", "dziewięćset",
    ),
    scale_forms=(
        ("tysiąc", "tysiące", "tysięcy"),
        ("milion", "miliony", "milionów"),
        ("miliard", "miliardy", "miliardów"),
        ("bilion", "biliony", "bilionów"),
        ("biliard", "biliardy", "biliardów"),
        ("trylion", "tryliony", "trylionów"),
        ("tryliard", "tryliardy", "tryliardów"),
        ("kwadrylion", "kwadryliony", "kwadrylionów"),
    ),
    omit_one_before_scale=True,
    plural_rule=POLISH,
    feminine_limit=1000,
    ordinals=OrdinalForms(
        ones=("", "pierwszy", "drugi", "trzeci", "czwarty", "piąty", "szósty", "siódmy", "ósmy", "dziewiąty"),
        teens=(
            "dziesiąty", "jedenasty", "dwunasty", "trzynasty", "czternasty",
            "piętnasty", "szesnasty", "siedemnasty", "osiemnasty", "dziewiętnasty",
        ),
        tens=(
            "", "dziesiąty", "dwudziesty", "trzydziesty", "czterdziesty",
            "pięćdziesiąty", "sześćdziesiąty", "siedemdziesiąty", "osiemdziesiąty", "dziewięćdziesiąty",
        ),
        hundreds=(
            "", "setny", "dwusetny", "trzechsetny", "czterechsetny",
            "pięćsetny", "sześćsetny", "siedemsetny", "osiemsetny", "dziewięćsetny",
        ),
        scales=(
            "tysięczny", "milionowy", "miliardowy", "bilionowy",
            "biliardowy", "trylionowy", "tryliardowy",
        ),
        ordinal_tens=True,
    ),
)

POLISH_LANGUAGE = Language(
    code="pl",
    name="Polish",
    engine=PROFILE,
    zero_word="zero",
    negative_word="minus",
    decimal_word="przecinek",
    options_model=GenderedOptions,
    ordinal=PROFILE.to_ordinal,
    ordinal_max_digits=PROFILE.ordinal_max_digits,
)
