"""
Number Words — spell numbers out in words, in many languages.

Architecture: Parse → Segment → Merge (greedy or inflected) → Decimals → Assemble
Philosophy:   Languages are data. One engine, many configuration records.
"""

from __future__ import annotations

from typing import Any, Optional

from .config import load_settings
from .converter import NumberConverter, OptionsInput
from .exceptions import NumberWordsError
from .languages import supported_languages
from .parser import NumericInput

__version__ = "1.0.0"

__all__ = [
    "NumberConverter",
    "NumberWordsError",
    "convert",
    "supported_languages",
    "to_ordinal",
]


def convert(
    value: NumericInput,
    lang: Optional[str] = None,
    options: OptionsInput = None,
    **kwargs: Any,
) -> str:
    """Spell `value` as cardinal words.

    `lang` defaults to NUMBER_WORDS_DEFAULT_LANG, or "en".

        >>> convert(1234567)
        'one million two hundred thirty-four thousand five hundred sixty-seven'
        >>> convert(21, "ru", gender="feminine")
        'двадцать одна'
    """
    return NumberConverter(lang or load_settings().default_lang).convert(value, options, **kwargs)


def to_ordinal(value: NumericInput, lang: Optional[str] = None, options: OptionsInput = None, **kwargs: Any) -> str:
    """Spell a positive whole number as ordinal words ("twenty-first")."""
    return NumberConverter(lang or load_settings().default_lang).ordinal(value, options, **kwargs)
