"""Join sign, integer words and decimal words into the final phrase."""

from __future__ import annotations

from typing import Optional, Sequence


def assemble(
    integer_words: str,
    decimal_words: Sequence[str] = (),
    *,
    negative_word: Optional[str] = None,
    decimal_word: str = "",
    joiner: str = " ",
    separator_joiner: Optional[str] = None,
) -> str:
    """Build `[negative] integer [decimal_word decimals...]`.

    `joiner` glues ordinary words ("" for logographic scripts).
    `separator_joiner` surrounds the negative and decimal separator words and
    defaults to `joiner`.
    """
    if not integer_words:
        raise ValueError("integer_words must not be empty; zero renders as the zero word")

    around = joiner if separator_joiner is None else separator_joiner
    text = integer_words
    if negative_word:
        text = negative_word + around + text
    if decimal_words:
        text = text + around + decimal_word + around + joiner.join(decimal_words)
    return text
