"""
Select the grammatical form of a scale word from a magnitude.

Slavic and Baltic languages inflect the scale word after a numeral:

    1 тысяча   2 тысячи   5 тысяч   11 тысяч   21 тысяча

A rule only decides WHICH index of the form table applies. The rules are
frozen dataclasses (pure, hashable, shareable across threads); the teen band
and the singular policy are parameters, never hard-coded per language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


class PluralRule(Protocol):
    def __call__(self, magnitude: int, form_count: int) -> int: ...


# ─── Rules ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SlavicRule:
    """Three-form singular / few / many selection.

    `teen_band` is the inclusive range of last-two-digit values that always
    take the "many" form: (11, 19) for Russian, (10, 20) for Polish.
    With `exact_singular` only the value 1 itself takes the singular
    (Polish "dwadzieścia jeden tysięcy", not "...tysiąc").
    """

    teen_band: tuple[int, int] = (11, 19)
    exact_singular: bool = False

    def __call__(self, magnitude: int, form_count: int) -> int:
        last_digit = magnitude % 10
        last_two = magnitude % 100
        low, high = self.teen_band

        if low <= last_two <= high:
            return 2
        if last_digit == 1 and (magnitude == 1 or not self.exact_singular):
            return 0
        if 2 <= last_digit <= 4:
            return 1
        return 2


@dataclass(frozen=True)
class TwoFormRule:
    """Singular for 1, 21, 31... (but not 11); plural otherwise.

    Zero takes the genitive when the table carries a third form.
    """

    def __call__(self, magnitude: int, form_count: int) -> int:
        if magnitude == 0 and form_count > 2:
            return 2
        if magnitude % 10 == 1 and magnitude % 100 != 11:
            return 0
        return 1


@dataclass(frozen=True)
class GenitiveRule:
    """Nominative singular / nominative plural / genitive plural.

    10-19 and round tens take the genitive; 1, 21, 31... the singular;
    everything else the nominative plural.
    """

    def __call__(self, magnitude: int, form_count: int) -> int:
        if 10 <= magnitude % 100 <= 19 or magnitude % 10 == 0:
            return 2
        if magnitude % 10 == 1:
            return 0
        return 1


SLAVIC = SlavicRule()
POLISH = SlavicRule(teen_band=(10, 20), exact_singular=True)
TWO_FORM = TwoFormRule()
GENITIVE = GenitiveRule()


# ─── Public API ──────────────────────────────────────────────────────


def select_form(magnitude: int, forms: Sequence[str], rule: PluralRule = SLAVIC) -> str:
    """Return the entry of `forms` that agrees with `magnitude`.

    A single-entry table (uninflected scale words) always returns its entry.
    """
    if not forms:
        raise ValueError("forms must contain at least one entry")
    if len(forms) == 1:
        return forms[0]
    index = rule(magnitude, len(forms))
    return forms[min(index, len(forms) - 1)]
