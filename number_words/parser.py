"""
Normalize heterogeneous numeric input into an exact ParsedValue.

THIS IS THE ONLY VALIDATION GATE FOR VALUES.

Everything downstream (segmenting, merging, pluralizing) assumes a clean
{sign, integer, fraction} record and is total over it. So every rejection
happens here, before a single word is produced.

Accepted inputs:
    42, -7, 10**40                 ints of any size
    3.14, 1e21, -0.0               finite floats (via their shortest repr)
    Decimal("1.50")                finite Decimals (digits kept verbatim)
    "  -12.050 ", "+5", ".5", "1.5e-3"

Rejected:
    True / None / lists / ...      -> InvalidInputType
    NaN, inf, "abc", "1.2.3", "--5", "1,000", ""  -> InvalidNumberFormat
    10**5000, "1e300000000"       -> MagnitudeOutOfRange (over MAX_INPUT_DIGITS)
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Union

from .exceptions import InvalidInputType, InvalidNumberFormat, MagnitudeOutOfRange
from .models import ParsedValue

NumericInput = Union[int, float, Decimal, str]

# Largest integer a binary64 float represents exactly (Number.MAX_SAFE_INTEGER)
MAX_EXACT_FLOAT_INT = 2**53 - 1

# Hard ceiling on integer and fraction digits, whatever the language. It sits
# below CPython's int<->str conversion limit (4300 digits).
MAX_INPUT_DIGITS = 4000
INPUT_CEILING = 10**MAX_INPUT_DIGITS

_MAX_EXPONENT_DIGITS = 9
_PREVIEW_CHARS = 80

# Sign, integer digits, optional fraction, optional exponent.
# At least one digit must appear in the mantissa.
_NUMBER_RE = re.compile(
    r"""
    ^(?P<sign>[+-])?
    (?=\.?[0-9])
    (?P<int>[0-9]*)
    (?:\.(?P<frac>[0-9]*))?
    (?:[eE](?P<exp>[+-]?[0-9]+))?$
    """,
    re.VERBOSE,
)


# ─── Scientific Notation ─────────────────────────────────────────────


def expand_scientific(text: str) -> str:
    """Expand "1.5e-3" into "0.0015" by moving the decimal point.

    Pure string manipulation: the mantissa's digits are kept exactly and
    only zero-padding is added, so no double rounding can occur.

    Examples:
        "1e21"     -> "1000000000000000000000"
        "1.25e+2"  -> "125"
        "-4.5e-3"  -> "-0.0045"
    """
    sign = ""
    if text and text[0] in "+-":
        sign, text = ("-" if text[0] == "-" else ""), text[1:]

    mantissa, _, exp_text = text.lower().partition("e")
    if not exp_text:
        return sign + mantissa
    exponent = int(exp_text)

    whole, _, frac = mantissa.partition(".")
    digits = whole + frac
    point = len(whole) + exponent

    if point >= len(digits):
        expanded = digits + "0" * (point - len(digits))
    elif point <= 0:
        expanded = "0." + "0" * (-point) + digits
    else:
        expanded = digits[:point] + "." + digits[point:]
    return sign + expanded


# ─── Public API ──────────────────────────────────────────────────────


def parse_numeric(value: NumericInput) -> ParsedValue:
    """Parse `value` into a ParsedValue.

    Raises:
        InvalidInputType: unsupported runtime type (bool included).
        InvalidNumberFormat: NaN, Infinity or an unparsable string.
        MagnitudeOutOfRange: more than MAX_INPUT_DIGITS integer or fraction digits.
    """
    # bool is an int subclass; True is not a number for our purposes
    if isinstance(value, bool):
        raise InvalidInputType(
            "Invalid value type: expected int, float, Decimal or str, received bool",
            {"type": "bool"},
        )

    if isinstance(value, int):
        if abs(value) >= INPUT_CEILING:
            raise MagnitudeOutOfRange(
                f"Integer exceeds {MAX_INPUT_DIGITS} digits",
                {"max_digits": MAX_INPUT_DIGITS, "bits": value.bit_length()},
            )
        return ParsedValue(is_negative=value < 0, integer_part=abs(value))

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberFormat(
                "Number must be finite (NaN and Infinity are not supported)",
                {"value": repr(value)},
            )
        if value.is_integer() and abs(value) <= MAX_EXACT_FLOAT_INT:
            integer = int(value)
            return ParsedValue(is_negative=integer < 0, integer_part=abs(integer))
        return _parse_string(repr(value), original=value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberFormat(
                "Decimal must be finite (NaN and Infinity are not supported)",
                {"value": str(value)},
            )
        return _parse_string(str(value), original=value)

    if isinstance(value, str):
        return _parse_string(value.strip(), original=value)

    raise InvalidInputType(
        f"Invalid value type: expected int, float, Decimal or str, "
        f"received {type(value).__name__}",
        {"type": type(value).__name__},
    )


# ─── Internals ───────────────────────────────────────────────────────


def _parse_string(text: str, original: object) -> ParsedValue:
    """Split a numeric string into sign, integer part and fraction."""
    match = _NUMBER_RE.match(text)
    if match is None:
        raise InvalidNumberFormat(
            f"Invalid number format: {preview(original)}", {"value": preview(original)}
        )

    whole = match.group("int") or ""
    digits = whole + (match.group("frac") or "")
    exponent = _exponent(match.group("exp"))
    point = len(whole) + exponent

    # Bounds are checked on the lengths alone, before any zero-padding
    significant = digits.lstrip("0")
    integer_digits = point - (len(digits) - len(significant)) if significant else 0
    fraction_digits = max(len(digits) - point, 0)
    if integer_digits > MAX_INPUT_DIGITS:
        raise MagnitudeOutOfRange(
            f"Number has {integer_digits} integer digits, at most {MAX_INPUT_DIGITS} are accepted",
            {"max_digits": MAX_INPUT_DIGITS, "digits": integer_digits},
        )
    if fraction_digits > MAX_INPUT_DIGITS:
        raise MagnitudeOutOfRange(
            f"Number has {fraction_digits} fractional digits, at most {MAX_INPUT_DIGITS} are accepted",
            {"max_fraction_digits": MAX_INPUT_DIGITS, "fraction_digits": fraction_digits},
        )

    if not significant:
        # All-zero mantissa: only the fraction width survives the exponent
        return ParsedValue(decimal_part="0" * fraction_digits or None)

    if match.group("exp") is not None:
        text = expand_scientific(text)
        match = _NUMBER_RE.match(text)
        assert match is not None  # expansion always yields a plain decimal

    integer_part = int(match.group("int") or "0")
    fraction = match.group("frac") or None

    # Canonical zero has no sign: "-0.000" is plain zero
    is_zero = integer_part == 0 and (fraction is None or not fraction.strip("0"))
    is_negative = match.group("sign") == "-" and not is_zero

    return ParsedValue(
        is_negative=is_negative,
        integer_part=integer_part,
        decimal_part=fraction,
    )


def _exponent(text: str | None) -> int:
    """Exponent value, saturated so absurd exponents never reach int()."""
    if text is None:
        return 0
    negative = text.startswith("-")
    magnitude = text.lstrip("+-").lstrip("0") or "0"
    if len(magnitude) > _MAX_EXPONENT_DIGITS:
        value = 10**_MAX_EXPONENT_DIGITS
    else:
        value = int(magnitude)
    return -value if negative else value


def preview(value: object) -> str:
    """Bounded repr for messages; huge ints cannot even be converted to str."""
    if isinstance(value, int) and abs(value) >= INPUT_CEILING:
        return f"<int of {value.bit_length()} bits>"
    text = repr(value)
    return text if len(text) <= _PREVIEW_CHARS else text[: _PREVIEW_CHARS - 3] + "..."
