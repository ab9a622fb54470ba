"""
Conversion orchestrator.

Flow:
  ┌──────────────┐
  │ value, opts  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Parser    │   ← the only value validation gate
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Options and  │   ← pydantic model per language, digit limit
  │  magnitude   │
  └──────┬───────┘
         │
  ┌──────▼───────┐     ┌──────────┐
  │ Merge engine │     │ Decimals │
  └──────┬───────┘     └────┬─────┘
         └────────┬─────────┘
           ┌──────▼──────┐
           │  Assembler  │
           └─────────────┘

Every check runs before the first word is produced, so a conversion either
returns a complete phrase or raises; it never fails half-way.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .assembler import assemble
from .decimals import render_decimal
from .exceptions import (
    MagnitudeOutOfRange,
    NumberWordsError,
    OrdinalDomainError,
    UnsupportedLanguage,
)
from .language import Language
from .languages import get_language
from .models import ConversionOptions, DecimalMode, ParsedValue
from .parser import NumericInput, parse_numeric, preview

logger = logging.getLogger(__name__)

OptionsInput = Union[None, Mapping[str, Any], ConversionOptions]


class NumberConverter:
    """Spell numbers in one language.

    Usage:
        converter = NumberConverter("ru")
        converter.convert(21000)                       # "двадцать одна тысяча"
        converter.convert(2, {"gender": "feminine"})   # "две"

    Instances hold only their (immutable) Language and may be shared freely.
    """

    def __init__(self, lang: Union[str, Language] = "en"):
        self.language = lang if isinstance(lang, Language) else get_language(lang)

    def __repr__(self) -> str:
        return f"NumberConverter({self.language.code!r})"

    # ─── Cardinals ──────────────────────────────────────────────────

    def convert(self, value: NumericInput, options: OptionsInput = None, **kwargs: Any) -> str:
        """Return the cardinal words for `value`.

        Options may be given as a mapping, an options model, or keyword
        arguments (keywords win over mapping entries).

        Raises:
            InvalidInputType, InvalidNumberFormat: bad `value`.
            UnsupportedOption: an option value the language does not accept.
            MagnitudeOutOfRange: more integer digits than the language can name.
        """
        try:
            parsed = parse_numeric(value)
            opts = self._options(options, kwargs)
            self._check_magnitude(parsed, self.language.digit_limit)
        except NumberWordsError as exc:
            logger.info("Rejected %s for %s: [%s] %s", preview(value), self.language.code, exc.code, exc)
            raise

        words = self._render(parsed, opts)
        logger.debug("Converted %r (%s) -> %r", value, self.language.code, words)
        return words

    # ─── Ordinals ───────────────────────────────────────────────────

    def ordinal(self, value: NumericInput, options: OptionsInput = None, **kwargs: Any) -> str:
        """Return the ordinal words for a positive whole number.

        Raises:
            UnsupportedLanguage: the language ships no ordinal forms.
            OrdinalDomainError: zero, negative or fractional `value`.
            MagnitudeOutOfRange: more digits than the ordinal forms can name.
        """
        try:
            hook = self.language.ordinal
            if hook is None:
                raise UnsupportedLanguage(
                    f"Ordinals are not available for {self.language.code}",
                    {"lang": self.language.code},
                )
            parsed = parse_numeric(value)
            if parsed.is_negative or parsed.integer_part == 0 or _has_fraction(parsed):
                raise OrdinalDomainError(
                    f"Ordinals require a positive whole number, received {preview(value)}",
                    {"value": preview(value)},
                )
            opts = self._options(options, kwargs)
            self._check_magnitude(parsed, self.language.ordinal_digit_limit)
        except NumberWordsError as exc:
            logger.info("Rejected ordinal %s for %s: [%s] %s", preview(value), self.language.code, exc.code, exc)
            raise

        words = hook(parsed.integer_part, opts)
        logger.debug("Ordinal %r (%s) -> %r", value, self.language.code, words)
        return words

    # ─── Internals ──────────────────────────────────────────────────

    def _options(self, options: OptionsInput, overrides: Mapping[str, Any]) -> ConversionOptions:
        if overrides:
            base = self.language.parse_options(options).model_dump() if options is not None else {}
            options = {**base, **overrides}
        return self.language.parse_options(options)

    def _check_magnitude(self, parsed: ParsedValue, limit: int) -> None:
        if parsed.integer_part >= 10**limit:
            raise MagnitudeOutOfRange(
                f"{self.language.name} can name integers of at most {limit} digits, "
                f"received {len(parsed.digits)}",
                {"lang": self.language.code, "max_digits": limit, "digits": len(parsed.digits)},
            )

    def _render(self, parsed: ParsedValue, opts: ConversionOptions) -> str:
        language = self.language
        integer_words = language.integer_to_words(parsed.integer_part, opts)

        decimal_words: list[str] = []
        if not parsed.is_whole:
            significant = parsed.decimal_part.lstrip("0")
            # a remainder too long to read as one number is read digit by digit
            per_digit = (
                language.decimal_mode is DecimalMode.PER_DIGIT
                or len(significant) > language.digit_limit
            )
            decimal_words = render_decimal(
                parsed.decimal_part,
                language.zero_word,
                lambda n: language.integer_to_words(n, opts),
                per_digit=per_digit,
            )

        return assemble(
            integer_words,
            decimal_words,
            negative_word=language.negative_word if parsed.is_negative else None,
            decimal_word=language.decimal_word,
            joiner=language.joiner,
            separator_joiner=language.separator_joiner,
        )


def _has_fraction(parsed: ParsedValue) -> bool:
    return not parsed.is_whole and bool(parsed.decimal_part.strip("0"))
