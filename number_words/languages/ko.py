"""
Korean: Sino-Korean numerals on the myriad scale.

Inside a myriad group the digits are written solid ("천이백삼십사"); a space
follows each myriad scale word. "일" is dropped before 십/백/천 and before a
bare myriad word ("만", "억"), but kept inside a larger multiplier ("십일만").
A bare myriad word directly after another is written solid ("억만").
"""

from __future__ import annotations

from ..greedy import GreedyProfile, WordValue
from ..language import Language
from ..models import ConversionOptions

ONES = ("", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")
MYRIADS = ("만", "억", "조", "경", "해", "자", "양")
MYRIAD = 10_000


def _scale_table() -> tuple[tuple[int, str], ...]:
    table = [(MYRIAD ** (i + 1), word) for i, word in enumerate(MYRIADS)]
    table.reverse()
    table.extend([(1000, "천"), (100, "백"), (10, "십")])
    table.extend((d, ONES[d]) for d in range(9, 0, -1))
    return tuple(table)


def combine(left: WordValue, right: WordValue, options: ConversionOptions) -> WordValue:
    if left.value == 1:
        return right
    if right.value > left.value:
        return WordValue(left.text + right.text, left.value * right.value)
    if left.value >= MYRIAD and right.text[:1] not in MYRIADS:
        return WordValue(f"{left.text} {right.text}", left.value + right.value)
    return WordValue(left.text + right.text, left.value + right.value)


PROFILE = GreedyProfile(scales=_scale_table(), combine=combine, zero_word="영")


def to_ordinal(n: int, options: ConversionOptions) -> str:
    return "제" + PROFILE.to_words(n, options)


KOREAN = Language(
    code="ko",
    name="Korean",
    engine=PROFILE,
    zero_word="영",
    negative_word="마이너스",
    decimal_word="점",
    max_digits=4 * (len(MYRIADS) + 1),
    ordinal=to_ordinal,
)
