"""
Greedy (largest-denomination-first) merge engine.

Used where the vocabulary is a flat, descending list of (value, word) pairs
and numerals compose by plain multiplication and addition: English, Turkic
languages, Korean, Chinese.

Algorithm, for n > 0:
    1. Take the first (value, word) with value <= n.
    2. div, mod = divmod(n, value).
    3. The multiplier is the literal "one" pair when div == 1 (the language's
       combine rule decides whether to say it), else the recursive merge of div.
    4. combine(multiplier, scale) gives one Term's phrase.
    5. mod > 0 starts the next Term.
Terms are collected in a flat list and reduced by `reduce_terms`: each Term is
merged multiplier-then-scale, then the phrases are folded from the right so a
remainder is always combined onto the phrase that precedes it.

    1234567  ->  [one × million] [two hundred thirty-four × thousand] [five hundred sixty-seven]

The engine guarantees only the reduction order. Grammar (omitting "one",
hyphens, spaces, zero placeholders) belongs entirely to `combine`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Optional

from .exceptions import VocabularyError
from .models import ConversionOptions


@dataclass(frozen=True)
class WordValue:
    """A phrase and the exact quantity it denotes."""

    text: str
    value: int


@dataclass(frozen=True)
class Term:
    """One greedy step: `multiplier` times the `scale` word."""

    multiplier: WordValue
    scale: WordValue


Combine = Callable[[WordValue, WordValue, ConversionOptions], WordValue]
Finalize = Callable[[str, ConversionOptions], str]
# Scale value to peel first from the whole number, or None for the greedy pick
LeadingScale = Callable[[int, ConversionOptions], Optional[int]]


# ─── Reduction ───────────────────────────────────────────────────────


def reduce_terms(terms: list[Term], combine: Combine, options: ConversionOptions) -> WordValue:
    """Collapse a list of Terms into a single WordValue."""
    if not terms:
        raise ValueError("Cannot reduce an empty term list")

    phrases = [combine(term.multiplier, term.scale, options) for term in terms]
    return reduce(
        lambda following, preceding: combine(preceding, following, options),
        reversed(phrases[:-1]),
        phrases[-1],
    )


# ─── Profile ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GreedyProfile:
    """Vocabulary and grammar hooks for a greedy language.

    Attributes:
        scales: (value, word) pairs in strictly descending order. Must cover
            every digit 1-9 so the decomposition always bottoms out.
        combine: merges two adjacent phrases (see module docstring).
        zero_word: returned for n == 0.
        finalize: optional orthographic post-processing of the full phrase.
        leading_scale: optional override of the first scale taken from the
            whole number (English "fifteen hundred" instead of "one thousand
            five hundred"). Multipliers are never affected.
    """

    scales: tuple[tuple[int, str], ...]
    combine: Combine
    zero_word: str
    finalize: Optional[Finalize] = None
    leading_scale: Optional[LeadingScale] = None

    def __post_init__(self) -> None:
        values = [value for value, _ in self.scales]
        if any(a <= b for a, b in zip(values, values[1:])):
            raise VocabularyError(
                "Greedy scale table must be strictly descending",
                {"values": values},
            )
        missing = sorted(set(range(1, 10)) - set(values))
        if missing:
            raise VocabularyError(
                "Greedy scale table must name every digit 1-9",
                {"missing": missing},
            )

    # ── Lookups ─────────────────────────────────────────────────────

    def word_for(self, value: int) -> WordValue:
        """Return the literal pair for an exact table value."""
        for scale_value, word in self.scales:
            if scale_value == value:
                return WordValue(word, scale_value)
        raise VocabularyError(f"No word for {value} in scale table", {"value": value})

    def _largest_not_above(self, n: int) -> WordValue:
        for value, word in self.scales:
            if value <= n:
                return WordValue(word, value)
        raise VocabularyError(f"No scale word fits {n}", {"value": n})

    # ── Decomposition ───────────────────────────────────────────────

    def decompose(self, n: int, options: ConversionOptions, first_scale: Optional[int] = None) -> list[Term]:
        """Peel off the largest scale not exceeding `n` until nothing remains.

        `first_scale` replaces the greedy pick for the first Term only.
        """
        terms: list[Term] = []
        remaining = n
        while remaining > 0:
            if first_scale is not None and not terms:
                scale = self.word_for(first_scale)
            else:
                scale = self._largest_not_above(remaining)
            div, remaining = divmod(remaining, scale.value)
            if div == 1:
                multiplier = self.word_for(1)
            else:
                multiplier = self.merge(div, options)
            terms.append(Term(multiplier, scale))
        return terms

    def merge(self, n: int, options: ConversionOptions) -> WordValue:
        """Decompose and reduce `n` into one WordValue."""
        if n == 0:
            return WordValue(self.zero_word, 0)
        return reduce_terms(self.decompose(n, options), self.combine, options)

    def to_words(self, n: int, options: ConversionOptions) -> str:
        first = self.leading_scale(n, options) if self.leading_scale is not None else None
        if first is None:
            text = self.merge(n, options).text
        else:
            text = reduce_terms(self.decompose(n, options, first), self.combine, options).text
        if self.finalize is not None:
            text = self.finalize(text, options)
        return text.strip()
