"""
Simplified Chinese.

Formal (financial) numerals by default, everyday numerals with formal=False:

    1010   -> "壹仟零壹拾"    / "一千零一十"
    17.42  -> "壹拾柒点肆贰"  / "一十七点四二"

A 零 marks every skipped position between two non-zero parts. Large numbers
stack 万 under 亿 ("贰佰贰拾贰万...亿") rather than using 兆.
"""

from __future__ import annotations

from ..greedy import GreedyProfile, WordValue
from ..language import Language
from ..models import ChineseOptions, ConversionOptions, DecimalMode

ZERO = "零"

FORMAL_DIGITS = ("", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")
FORMAL_UNITS = ("拾", "佰", "仟")
COMMON_DIGITS = ("", "一", "二", "三", "四", "五", "六", "七", "八", "九")
COMMON_UNITS = ("十", "百", "千")
MYRIADS = ((10**8, "亿"), (10**4, "万"))


def _scale_table(digits: tuple[str, ...], units: tuple[str, ...]) -> tuple[tuple[int, str], ...]:
    table = list(MYRIADS)
    table.extend((10 ** (i + 1), unit) for i, unit in reversed(list(enumerate(units))))
    table.extend((d, digits[d]) for d in range(9, 0, -1))
    return tuple(table)


def _trailing_zeros(n: int) -> int:
    digits = str(n)
    return len(digits) - len(digits.rstrip("0"))


def combine(left: WordValue, right: WordValue, options: ConversionOptions) -> WordValue:
    if left.value == 1 and right.value < 10:
        return right
    if right.value > left.value:
        return WordValue(left.text + right.text, left.value * right.value)
    # a gap of skipped positions is read as a single 零
    if _trailing_zeros(left.value) > len(str(right.value)):
        return WordValue(left.text + ZERO + right.text, left.value + right.value)
    return WordValue(left.text + right.text, left.value + right.value)


FORMAL = GreedyProfile(scales=_scale_table(FORMAL_DIGITS, FORMAL_UNITS), combine=combine, zero_word=ZERO)
COMMON = GreedyProfile(scales=_scale_table(COMMON_DIGITS, COMMON_UNITS), combine=combine, zero_word=ZERO)


def select_numerals(options: ConversionOptions) -> GreedyProfile:
    return FORMAL if getattr(options, "formal", True) else COMMON


def to_ordinal(n: int, options: ConversionOptions) -> str:
    return "第" + select_numerals(options).to_words(n, options)


CHINESE = Language(
    code="zh",
    name="Chinese (Simplified)",
    engine=FORMAL,
    zero_word=ZERO,
    negative_word="负",
    decimal_word="点",
    joiner="",
    decimal_mode=DecimalMode.PER_DIGIT,
    options_model=ChineseOptions,
    max_digits=16,
    engine_for=select_numerals,
    ordinal=to_ordinal,
)
