"""
English (short scale, US style by default).

    1234567 -> "one million two hundred thirty-four thousand five hundred sixty-seven"
    101     -> "one hundred one"      use_and=True -> "one hundred and one"
    1523    -> "one thousand five hundred twenty-three"
               hundred_pairing=True -> "fifteen hundred twenty-three"
"""

from __future__ import annotations

from typing import Optional

from ..greedy import GreedyProfile, WordValue
from ..language import Language
from ..models import ConversionOptions, EnglishOptions

ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
SCALES = (
    "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion", "undecillion", "duodecillion", "tredecillion", "quattuordecillion",
    "quindecillion", "sexdecillion", "septendecillion", "octodecillion", "novemdecillion",
    "vigintillion",
)

ORDINAL_ONES = ("", "first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth")
ORDINAL_TEENS = (
    "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth",
    "fifteenth", "sixteenth", "seventeenth", "eighteenth", "nineteenth",
)
ORDINAL_TENS = (
    "", "", "twentieth", "thirtieth", "fortieth",
    "fiftieth", "sixtieth", "seventieth", "eightieth", "ninetieth",
)


def _scale_table() -> tuple[tuple[int, str], ...]:
    table = [(10 ** (3 * (i + 1)), word) for i, word in enumerate(SCALES)]
    table.reverse()
    table.append((100, "hundred"))
    table.extend((10 * t, TENS[t]) for t in range(9, 1, -1))
    table.extend((10 + i, TEENS[i]) for i in range(9, -1, -1))
    table.extend((d, ONES[d]) for d in range(9, 0, -1))
    return tuple(table)


def combine(left: WordValue, right: WordValue, options: ConversionOptions) -> WordValue:
    # "one" is only spoken before hundred and the scale words
    if left.value == 1 and right.value < 100:
        return right
    if left.value < 100 and left.value > right.value:
        return WordValue(f"{left.text}-{right.text}", left.value + right.value)
    if getattr(options, "use_and", False) and left.value >= 100 and right.value < 100:
        return WordValue(f"{left.text} and {right.text}", left.value + right.value)
    if right.value > left.value:
        return WordValue(f"{left.text} {right.text}", left.value * right.value)
    return WordValue(f"{left.text} {right.text}", left.value + right.value)


def paired_hundreds(n: int, options: ConversionOptions) -> Optional[int]:
    """Read 1100-9999 in hundreds when `hundred_pairing` is set."""
    if getattr(options, "hundred_pairing", False) and 1100 <= n <= 9999:
        return 100
    return None


def cardinal_to_ordinal(cardinal: str) -> str:
    """Inflect the last word of a cardinal phrase: "twenty-one" -> "twenty-first"."""
    cut = max(cardinal.rfind(" "), cardinal.rfind("-"))
    prefix, last = cardinal[: cut + 1], cardinal[cut + 1 :]

    if last in ONES[1:]:
        word = ORDINAL_ONES[ONES.index(last)]
    elif last in TEENS:
        word = ORDINAL_TEENS[TEENS.index(last)]
    elif last in TENS[2:]:
        word = ORDINAL_TENS[TENS.index(last)]
    else:
        # hundred, thousand, million... all take a plain suffix
        word = last + "th"
    return prefix + word


PROFILE = GreedyProfile(
    scales=_scale_table(),
    combine=combine,
    zero_word="zero",
    leading_scale=paired_hundreds,
)


def to_ordinal(n: int, options: ConversionOptions) -> str:
    return cardinal_to_ordinal(PROFILE.to_words(n, options))


ENGLISH = Language(
    code="en",
    name="English",
    engine=PROFILE,
    zero_word="zero",
    negative_word="minus",
    decimal_word="point",
    options_model=EnglishOptions,
    max_digits=3 * (len(SCALES) + 1),
    ordinal=to_ordinal,
)
