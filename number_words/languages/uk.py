"""Ukrainian: the Russian grammar preset with Ukrainian vocabulary.

Ordinals keep the feminine thousands: 2000 -> "дві тисячний".
"""

from __future__ import annotations

from dataclasses import replace

from ..inflected import OrdinalForms
from . import ru

PROFILE = replace(
    ru.PROFILE,
    ones=("", "один", "два", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять"),
    ones_feminine=("", "одна", "дві", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять"),
    teens=(
        "десять", "одинадцять", "дванадцять", "тринадцять", "чотирнадцять",
        "п'ятнадцять", "шістнадцять", "сімнадцять", "вісімнадцять", "дев'ятнадцять",
    ),
    tens=(
        "", "десять", "двадцять", "тридцять", "сорок",
        "п'ятдесят", "шістдесят", "сімдесят", "вісімдесят", "дев'яносто",
    ),
    hundreds=(
        "", "сто", "двісті", "триста", "чотириста",
        "п'ятсот", "шістсот", "сімсот", "вісімсот", "дев'ятсот",
    ),
    scale_forms=(
        ("тисяча", "тисячі", "тисяч"),
        ("мільйон", "мільйони", "мільйонів"),
        ("мільярд", "мільярди", "мільярдів"),
        ("трильйон", "трильйони", "трильйонів"),
        ("квадрильйон", "квадрильйони", "квадрильйонів"),
        ("квінтильйон", "квінтильйони", "квінтильйонів"),
    ),
    ordinals=OrdinalForms(
        ones=("", "перший", "другий", "третій", "четвертий", "п'ятий", "шостий", "сьомий", "восьмий", "дев'ятий"),
        teens=(
            "десятий", "одинадцятий", "дванадцятий", "тринадцятий", "чотирнадцятий",
            "п'ятнадцятий", "шістнадцятий", "сімнадцятий", "вісімнадцятий", "дев'ятнадцятий",
        ),
        tens=(
            "", "десятий", "двадцятий", "тридцятий", "сороковий",
            "п'ятдесятий", "шістдесятий", "сімдесятий", "вісімдесятий", "дев'яностий",
        ),
        hundreds=(
            "", "сотий", "двохсотий", "трьохсотий", "чотирьохсотий",
            "п'ятисотий", "шестисотий", "семисотий", "восьмисотий", "дев'ятисотий",
        ),
        scales=("тисячний", "мільйонний", "мільярдний", "трильйонний"),
    ),
)

UKRAINIAN = replace(
    ru.RUSSIAN,
    code="uk",
    name="Ukrainian",
    engine=PROFILE,
    zero_word="нуль",
    negative_word="мінус",
    decimal_word="кома",
    ordinal=PROFILE.to_ordinal,
    ordinal_max_digits=PROFILE.ordinal_max_digits,
)
