"""
Modern Hebrew (feminine counting forms).

    21      -> "עשרים ואחת"
    2000    -> "אלפיים"
    1001    -> "אלף ואחת"
    2000000 -> "שתים מיליונים"

Ordinals are masculine:

    1       -> "ראשון"
    21      -> "עשרים וראשון"
"""

from __future__ import annotations

from ..inflected import InflectedProfile
from ..language import Language
from ..models import ConjunctionOptions, ConversionOptions, DecimalMode

PROFILE = InflectedProfile(
    ones=("", "אחת", "שתים", "שלש", "ארבע", "חמש", "שש", "שבע", "שמונה", "תשע"),
    teens=(
        "עשר", "אחת עשרה", "שתים עשרה", "שלש עשרה", "ארבע עשרה",
        "חמש עשרה", "שש עשרה", "שבע עשרה", "שמונה עשרה", "תשע עשרה",
    ),
    tens=("", "עשר", "עשרים", "שלשים", "ארבעים", "חמישים", "ששים", "שבעים", "שמונים", "תשעים"),
    hundreds=(
        "", "מאה", "מאתיים", "שלש מאות", "ארבע מאות",
        "חמש מאות", "שש מאות", "שבע מאות", "שמונה מאות", "תשע מאות",
    ),
    thousands_construct=(
        "", "אלף", "אלפיים", "שלשת אלפים", "ארבעת אלפים",
        "חמשת אלפים", "ששת אלפים", "שבעת אלפים", "שמונת אלפים", "תשעת אלפים",
    ),
    scale_forms=(
        ("אלף", "אלפים"),
        ("מיליון", "מיליונים"),
        ("מיליארד", "מיליארדים"),
        ("טריליון", "טריליונים"),
        ("קוודרליון", "קוודרליונים"),
        ("קווינטיליון", "קווינטיליונים"),
    ),
    conjunction="ו",
)

ORDINAL_ONES = ("", "ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי", "שביעי", "שמיני", "תשיעי")
ORDINAL_TEENS = (
    "עשירי", "אחד עשר", "שנים עשר", "שלשה עשר", "ארבעה עשר",
    "חמשה עשר", "ששה עשר", "שבעה עשר", "שמונה עשר", "תשעה עשר",
)
ORDINAL_TENS = ("", "", "עשרים", "שלשים", "ארבעים", "חמישים", "ששים", "שבעים", "שמונים", "תשעים")


def _ordinal_below_hundred(n: int, and_word: str) -> str:
    if n < 10:
        return ORDINAL_ONES[n]
    if n < 20:
        return ORDINAL_TEENS[n - 10]
    tens, ones = divmod(n, 10)
    if ones == 0:
        return ORDINAL_TENS[tens]
    return f"{ORDINAL_TENS[tens]} {and_word}{ORDINAL_ONES[ones]}"


def _ordinal_below_thousand(n: int, and_word: str) -> str:
    hundreds, rest = divmod(n, 100)
    words = [PROFILE.hundreds[hundreds]] if hundreds else []
    if rest:
        words.append(_ordinal_below_hundred(rest, and_word))
    return " ".join(words)


def to_ordinal(n: int, options: ConversionOptions) -> str:
    """Masculine ordinal: cardinal millions and thousands, ordinal tail.

    Only the last component below a hundred takes an ordinal form.
    """
    and_word = getattr(options, "and_word", None) or PROFILE.conjunction
    millions, n = divmod(n, 1_000_000)
    thousands, n = divmod(n, 1000)
    words: list[str] = []

    if millions == 1:
        words.append(PROFILE.scale_forms[1][0])
    elif millions:
        words.append(f"{PROFILE.conjunctive_segment(millions, and_word)} {PROFILE.scale_forms[1][-1]}")

    if thousands:
        if thousands <= 9:
            words.append(PROFILE.thousands_construct[thousands])
        else:
            words.append(f"{PROFILE.conjunctive_segment(thousands, and_word)} {PROFILE.scale_forms[0][0]}")

    if n:
        words.append(_ordinal_below_thousand(n, and_word))
    return " ".join(words)


HEBREW = Language(
    code="he",
    name="Hebrew",
    engine=PROFILE,
    zero_word="אפס",
    negative_word="מינוס",
    decimal_word="נקודה",
    decimal_mode=DecimalMode.PER_DIGIT,
    options_model=ConjunctionOptions,
    ordinal=to_ordinal,
    ordinal_max_digits=9,
)
