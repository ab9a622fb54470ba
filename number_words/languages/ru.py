"""
Russian. Thousands are feminine ("одна тысяча", "две тысячи"); the units
segment follows the caller's gender.
"""

from __future__ import annotations

from ..inflected import InflectedProfile
from ..language import Language
from ..models import GenderedOptions
from ..plurals import SLAVIC

PROFILE = InflectedProfile(
    ones=("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    ones_feminine=("", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    teens=(
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
        "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    ),
    tens=(
        "", "десять", "двадцать", "тридцать", "сорок",
        "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
    ),
    hundreds=(
        "", "сто", "двести", "триста", "четыреста",
        "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
    ),
    scale_forms=(
        ("тысяча", "тысячи", "тысяч"),
        ("миллион", "миллиона", "миллионов"),
        ("миллиард", "миллиарда", "миллиардов"),
        ("триллион", "триллиона", "триллионов"),
        ("квадриллион", "квадриллиона", "квадриллионов"),
        ("квинтиллион", "квинтиллиона", "квинтиллионов"),
        ("секстиллион", "секстиллиона", "секстиллионов"),
        ("септиллион", "септиллиона", "септиллионов"),
        ("октиллион", "октиллиона", "октиллионов"),
        ("нониллион", "нониллиона", "нониллионов"),
        ("дециллион", "дециллиона", "дециллионов"),
    ),
    feminine_scales=frozenset({1}),
    plural_rule=SLAVIC,
)

RUSSIAN = Language(
    code="ru",
    name="Russian",
    engine=PROFILE,
    zero_word="ноль",
    negative_word="минус",
    decimal_word="запятая",
    options_model=GenderedOptions,
)
