"""
Hindi, on the Indian grouping (hazaar, lakh, crore...).

Every number below one hundred has its own word, so the segment engine
reads them from a single table instead of composing tens and ones.

    123456789 -> "बारह करोड़ चौंतीस लाख छप्पन हज़ार सात सौ नवासी"

Ordinals past the sixth add "वाँ" to the cardinal: 10 -> "दसवाँ".
"""

from __future__ import annotations

from ..inflected import InflectedProfile
from ..language import Language
from ..models import ConversionOptions
from ..segments import Grouping

BELOW_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)

PROFILE = InflectedProfile(
    ones=BELOW_HUNDRED[:10],
    teens=BELOW_HUNDRED[10:20],
    tens=BELOW_HUNDRED[::10],
    hundreds=("",) + tuple(f"{BELOW_HUNDRED[h]} सौ" for h in range(1, 10)),
    scale_forms=(
        ("हज़ार",), ("लाख",), ("करोड़",), ("अरब",),
        ("खरब",), ("नील",), ("पद्म",), ("शंख",),
    ),
    grouping=Grouping.INDIAN,
    below_hundred=BELOW_HUNDRED,
)

ORDINAL_SPECIAL = ("", "पहला", "दूसरा", "तीसरा", "चौथा", "पाँचवाँ", "छठा")
ORDINAL_SUFFIX = "वाँ"


def to_ordinal(n: int, options: ConversionOptions) -> str:
    if n < len(ORDINAL_SPECIAL):
        return ORDINAL_SPECIAL[n]
    return PROFILE.to_words(n, options) + ORDINAL_SUFFIX


HINDI = Language(
    code="hi",
    name="Hindi",
    engine=PROFILE,
    zero_word="शून्य",
    negative_word="माइनस",
    decimal_word="दशमलव",
    ordinal=to_ordinal,
)
