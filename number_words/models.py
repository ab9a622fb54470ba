"""
Pydantic models for conversion data — strict typing at the boundary.

ParsedValue is the single exact record every conversion is built from.
The options models define, per language family, the CLOSED set of keys a
caller may pass. Unknown keys are ignored; bad values fail loudly before any
words are produced.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Enumerations ────────────────────────────────────────────────────


class Gender(str, Enum):
    """Grammatical gender applied to the units segment."""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class DecimalMode(str, Enum):
    """How digits after the decimal point are read."""

    GROUPED = "grouped"  # "0.45" -> zero point forty-five
    PER_DIGIT = "per_digit"  # "0.45" -> zero point four five


# ─── Parsed Value ───────────────────────────────────────────────────


class ParsedValue(BaseModel):
    """Exact sign / integer / fraction record produced by the parser.

    No floating-point arithmetic ever touches these fields: `integer_part`
    is a Python int (arbitrary precision) and `decimal_part` keeps the
    fractional digits verbatim, leading and trailing zeros included.
    """

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_part: int = Field(default=0, ge=0)
    decimal_part: Optional[str] = Field(default=None, pattern=r"^[0-9]+$")

    @property
    def digits(self) -> str:
        """Integer part as a digit string, e.g. "1234567"."""
        return str(self.integer_part)

    @property
    def is_whole(self) -> bool:
        return self.decimal_part is None


# ─── Conversion Options ─────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Base options model. Languages without options use it as-is."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class GenderedOptions(ConversionOptions):
    """Options for languages whose numerals agree in gender."""

    gender: Gender = Gender.MASCULINE


class EnglishOptions(ConversionOptions):
    """`use_and=True` gives British "one hundred and one";
    `hundred_pairing=True` reads 1100-9999 as "fifteen hundred"."""

    use_and: bool = False
    hundred_pairing: bool = False


class ChineseOptions(ConversionOptions):
    """Formal (financial) numerals are the default."""

    formal: bool = True


class TurkishOptions(ConversionOptions):
    """`drop_spaces=True` writes the numeral as one word ("yüzyirmiüç")."""

    drop_spaces: bool = False


class ConjunctionOptions(ConversionOptions):
    """Override for the conjunction prefixed to the final component."""

    and_word: str = Field(default="ו", min_length=1)
