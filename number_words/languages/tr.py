"""
Turkish: implicit "bir" before yüz and bin, but not before milyon and up.

    1000    -> "bin"
    1100000 -> "bir milyon yüz bin"

Ordinals are written as one word with a vowel-harmony suffix:

    21      -> "yirmibirinci"
    20      -> "yirminci"
"""

from __future__ import annotations

from ..greedy import GreedyProfile, WordValue
from ..language import Language
from ..models import ConversionOptions, TurkishOptions

ONES = ("", "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz")
TENS = ("", "on", "yirmi", "otuz", "kırk", "elli", "altmış", "yetmiş", "seksen", "doksan")
SCALES = ("bin", "milyon", "milyar", "trilyon", "katrilyon", "kentilyon")


def _scale_table() -> tuple[tuple[int, str], ...]:
    table = [(10 ** (3 * (i + 1)), word) for i, word in enumerate(SCALES)]
    table.reverse()
    table.append((100, "yüz"))
    table.extend((10 * t, TENS[t]) for t in range(9, 0, -1))
    table.extend((d, ONES[d]) for d in range(9, 0, -1))
    return tuple(table)


def combine(left: WordValue, right: WordValue, options: ConversionOptions) -> WordValue:
    if left.value == 1 and (right.value <= 100 or right.value == 1000):
        return right
    sep = "" if getattr(options, "drop_spaces", False) else " "
    if right.value > left.value:
        return WordValue(f"{left.text}{sep}{right.text}", left.value * right.value)
    return WordValue(f"{left.text}{sep}{right.text}", left.value + right.value)


PROFILE = GreedyProfile(scales=_scale_table(), combine=combine, zero_word="sıfır")

ORDINAL_SPECIAL = (
    "", "birinci", "ikinci", "üçüncü", "dördüncü", "beşinci",
    "altıncı", "yedinci", "sekizinci", "dokuzuncu", "onuncu",
)
BACK_VOWELS = "aıou"
FRONT_VOWELS = "eiöü"


def ordinal_suffix(word: str) -> str:
    """Pick the -inci suffix by the last vowel; a final vowel drops its own."""
    suffix = "inci"
    for char in reversed(word):
        if char in "ou":
            suffix = "uncu"
        elif char in "aı":
            suffix = "ıncı"
        elif char in "öü":
            suffix = "üncü"
        elif char not in FRONT_VOWELS:
            continue
        break
    if word[-1:] in BACK_VOWELS + FRONT_VOWELS:
        return suffix[1:]
    return suffix


def to_ordinal(n: int, options: ConversionOptions) -> str:
    if n < len(ORDINAL_SPECIAL):
        return ORDINAL_SPECIAL[n]
    cardinal = PROFILE.to_words(n, TurkishOptions(drop_spaces=True))
    suffix = ordinal_suffix(cardinal)
    # dört softens before a vowel
    if cardinal.endswith("dört"):
        cardinal = cardinal[:-1] + "d"
    return cardinal + suffix


TURKISH = Language(
    code="tr",
    name="Turkish",
    engine=PROFILE,
    zero_word="sıfır",
    negative_word="eksi",
    decimal_word="virgül",
    options_model=TurkishOptions,
    ordinal=to_ordinal,
    max_digits=3 * (len(SCALES) + 1),
)
