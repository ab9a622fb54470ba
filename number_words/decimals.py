"""
Render the fractional digits of a number as words.

Leading zeros are significant after the decimal point, so each one is spoken:

    "05"  -> ["zero", "five"]         (0.05 is not 0.5)
    "00"  -> ["zero", "zero"]
    "125" -> ["one hundred twenty-five"]              grouped
    "125" -> ["one", "two", "five"]                   per-digit
"""

from __future__ import annotations

from typing import Callable

IntegerToWords = Callable[[int], str]


def render_decimal(
    digits: str,
    zero_word: str,
    integer_to_words: IntegerToWords,
    per_digit: bool = False,
) -> list[str]:
    """Return the word tokens for `digits`.

    Args:
        digits: fractional digits exactly as parsed (e.g. "050").
        zero_word: the language's word for 0.
        integer_to_words: converts a positive integer to a phrase.
        per_digit: speak every remaining digit on its own instead of
            reading them as one integer.
    """
    if not digits:
        return []

    significant = digits.lstrip("0")
    words = [zero_word] * (len(digits) - len(significant))
    if not significant:
        return words

    if per_digit:
        words.extend(zero_word if ch == "0" else integer_to_words(int(ch)) for ch in significant)
    else:
        words.append(integer_to_words(int(significant)))
    return words
