"""
Chunk-based inflected merge engine.

Used for languages where numerals agree in gender and scale words inflect
for number: Slavic, Baltic, the Hebrew family, and (with Indian grouping
and a below-hundred table) South Asian languages.

For every non-zero segment, most-significant first:

    hundreds word           if the hundreds digit > 0
    teen word               if the tens digit == 1 (ones are then skipped)
    tens word + ones word   otherwise; ones may switch to feminine lexemes
                            or be omitted before a scale word ("tysiąc")
    scale word              pluralized by the profile's rule when scale_index > 0

Two data-driven extensions live here too:

  * `feminine_limit`   feminine units only while the whole number is below
                       the limit (Lithuanian "viena", but "vienas" in 1001).
  * `conjunction`      construct-state numerals that prefix a conjunction to
                       the ones digit ("עשרים ואחת"), to components that
                       follow hundreds in higher segments and to a lone
                       final digit, with dual forms for 200 and 2000.

Ordinals follow one pattern across the segment languages: every component
stays cardinal except the last spoken one, which takes the ordinal form
("dwudziesty pierwszy", "du tūkstančiai tūkstantasis").

Per-call inputs (gender, conjunction override, the integer itself) travel as
parameters. A profile is frozen and safely shared by any number of threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .exceptions import VocabularyError
from .models import ConversionOptions, Gender
from .plurals import SLAVIC, PluralRule, select_form
from .segments import Grouping, Segment, place_values, split_segments

# (hundreds digit, segment value) -> words for the hundreds place
HundredsHook = Callable[[int, int], list[str]]


@dataclass(frozen=True)
class OrdinalForms:
    """Ordinal vocabulary, indexed like the cardinal digit tables.

    `hundreds[h]` is the ordinal of an exact hundred and `scales[i]` the
    ordinal scale word for segment index i + 1. Compound tens ("twenty-first")
    keep a cardinal tens word unless `ordinal_tens` is set. With
    `repeat_scale` a multiplied final scale keeps its cardinal form before the
    ordinal one.
    """

    ones: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scales: tuple[str, ...]
    ordinal_tens: bool = False
    repeat_scale: bool = False

    def __post_init__(self) -> None:
        for name in ("ones", "teens", "tens", "hundreds"):
            if len(getattr(self, name)) != 10:
                raise VocabularyError(f"ordinal '{name}' table must have 10 entries", {"table": name})
        if not self.scales:
            raise VocabularyError("Ordinal forms need at least one scale word")


@dataclass(frozen=True)
class InflectedProfile:
    """Vocabulary tables and grammar flags for an inflected language.

    Digit tables are indexed by digit: `ones[3]` is the word for 3,
    `teens[3]` the word for 13, `tens[3]` for 30, `hundreds[3]` for 300.
    `scale_forms[i]` holds the inflected forms of the scale word for segment
    index i + 1 (thousand, million, ...).
    """

    ones: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scale_forms: tuple[tuple[str, ...], ...]
    ones_feminine: Optional[tuple[str, ...]] = None
    feminine_scales: frozenset[int] = field(default_factory=frozenset)
    omit_one_before_scale: bool = False
    plural_rule: PluralRule = SLAVIC
    grouping: Grouping = Grouping.THOUSANDS
    feminine_limit: Optional[int] = None
    below_hundred: Optional[tuple[str, ...]] = None
    hundreds_hook: Optional[HundredsHook] = None
    joiner: str = " "
    conjunction: Optional[str] = None
    thousands_construct: Optional[tuple[str, ...]] = None
    ordinals: Optional[OrdinalForms] = None

    def __post_init__(self) -> None:
        if self.grouping is Grouping.MYRIAD:
            raise VocabularyError("Segments hold at most three digits; myriad grouping is not supported")
        if self.ordinals is not None and (self.grouping is not Grouping.THOUSANDS or self.conjunction):
            raise VocabularyError("Ordinal forms need plain thousands grouping")
        for name in ("ones", "teens", "tens", "hundreds"):
            if len(getattr(self, name)) != 10:
                raise VocabularyError(f"'{name}' table must have 10 entries", {"table": name})
        if self.ones_feminine is not None and len(self.ones_feminine) != 10:
            raise VocabularyError("'ones_feminine' table must have 10 entries")
        if self.below_hundred is not None and len(self.below_hundred) != 100:
            raise VocabularyError("'below_hundred' table must have 100 entries")
        if self.conjunction is not None and (
            self.thousands_construct is None or len(self.thousands_construct) != 10
        ):
            raise VocabularyError("Conjunctive profiles need a 10-entry 'thousands_construct' table")
        if any(not forms for forms in self.scale_forms):
            raise VocabularyError("Every scale must have at least one form")

    @property
    def max_digits(self) -> int:
        """Longest integer (in digits) the scale table can name."""
        scales = len(self.scale_forms)
        if self.grouping is Grouping.INDIAN:
            return 3 + 2 * scales
        return self.grouping.value * (scales + 1)

    @property
    def ordinal_max_digits(self) -> int:
        """Longest integer (in digits) the ordinal scale words can name."""
        if self.ordinals is None:
            return 0
        return 3 * (min(len(self.ordinals.scales), len(self.scale_forms)) + 1)

    # ── Public ──────────────────────────────────────────────────────

    def to_words(self, n: int, options: ConversionOptions) -> str:
        """Convert a positive integer to words."""
        if self.conjunction is not None:
            and_word = getattr(options, "and_word", None) or self.conjunction
            return self._conjunctive_words(n, and_word)

        gender = getattr(options, "gender", Gender.MASCULINE)
        words: list[str] = []
        for segment in split_segments(str(n), self.grouping):
            if segment.value == 0:
                continue
            words.extend(self._segment_words(segment, n, gender))
        return self.joiner.join(words)

    def to_ordinal(self, n: int, options: ConversionOptions) -> str:
        """Convert a positive integer to its (masculine) ordinal."""
        if self.ordinals is None:
            raise VocabularyError("This profile has no ordinal forms")

        *head, last = [s for s in split_segments(str(n), self.grouping) if s.value]
        words: list[str] = []
        for segment in head:
            words.extend(self._segment_words(segment, n, Gender.MASCULINE))
        words.extend(self._ordinal_segment_words(last, n))
        return self.joiner.join(words)

    # ── Segment conversion ──────────────────────────────────────────

    def _segment_words(
        self, segment: Segment, whole: int, gender: Gender, with_scale: bool = True
    ) -> list[str]:
        value, index = segment.value, segment.scale_index
        ones, tens, hundreds = place_values(value)
        omit_one = self.omit_one_before_scale and index > 0 and value == 1
        words: list[str] = []

        if hundreds > 0:
            words.extend(self._hundreds_words(hundreds, value))

        if self.below_hundred is not None:
            if value % 100 and not omit_one:
                words.append(self.below_hundred[value % 100])
        elif tens == 1:
            words.append(self.teens[ones])
        else:
            if tens > 1:
                words.append(self.tens[tens])
            if ones > 0 and not omit_one:
                words.append(self._ones_table(index, whole, gender)[ones])

        if index > 0 and with_scale:
            words.append(select_form(value, self._forms(index), self.plural_rule))
        return words

    def _hundreds_words(self, hundreds: int, value: int) -> list[str]:
        if self.hundreds_hook is not None:
            return self.hundreds_hook(hundreds, value)
        return [self.hundreds[hundreds]]

    def _ones_table(self, index: int, whole: int, gender: Gender) -> tuple[str, ...]:
        feminine = index in self.feminine_scales or (
            gender is Gender.FEMININE
            and index == 0
            and (self.feminine_limit is None or whole < self.feminine_limit)
        )
        if feminine and self.ones_feminine is not None:
            return self.ones_feminine
        return self.ones

    # ── Ordinals ────────────────────────────────────────────────────

    def _ordinal_segment_words(self, segment: Segment, whole: int) -> list[str]:
        assert self.ordinals is not None
        forms = self.ordinals
        value, index = segment.value, segment.scale_index

        if index == 0:
            hundreds, rest = divmod(value, 100)
            if rest == 0:
                return [forms.hundreds[hundreds]]
            words = self._hundreds_words(hundreds, hundreds * 100) if hundreds else []
            return words + self._ordinal_below_hundred(rest)

        try:
            scale = forms.scales[index - 1]
        except IndexError:
            raise VocabularyError(f"No ordinal scale word for segment index {index}", {"index": index}) from None
        if value == 1:
            return [scale]
        words = self._segment_words(segment, whole, Gender.MASCULINE, with_scale=forms.repeat_scale)
        return words + [scale]

    def _ordinal_below_hundred(self, value: int) -> list[str]:
        assert self.ordinals is not None
        forms = self.ordinals
        tens, ones = divmod(value, 10)
        if tens == 0:
            return [forms.ones[ones]]
        if tens == 1:
            return [forms.teens[ones]]
        if ones == 0:
            return [forms.tens[tens]]
        tens_word = forms.tens[tens] if forms.ordinal_tens else self.tens[tens]
        return [tens_word, forms.ones[ones]]

    def _forms(self, index: int) -> tuple[str, ...]:
        try:
            return self.scale_forms[index - 1]
        except IndexError:
            # max_digits is checked before conversion, so this is a table defect
            raise VocabularyError(f"No scale word for segment index {index}", {"index": index}) from None

    # ── Conjunctive (construct-state) numerals ──────────────────────

    def _conjunctive_words(self, n: int, and_word: str) -> str:
        assert self.thousands_construct is not None
        words: list[str] = []

        for segment in split_segments(str(n), Grouping.THOUSANDS):
            value, index = segment.value, segment.scale_index
            if value == 0:
                continue

            if index == 0:
                units = self.conjunctive_segment(value, and_word, units=True)
                # a lone digit after a scale word takes the conjunction
                if words and value <= 9:
                    units = and_word + units
                words.append(units)
            elif index == 1 and value <= 9:
                words.append(self.thousands_construct[value])
            elif index == 1:
                words.append(f"{self.conjunctive_segment(value, and_word)} {self._forms(1)[0]}")
            elif value == 1:
                words.append(self._forms(index)[0])
            else:
                forms = self._forms(index)
                words.append(f"{self.conjunctive_segment(value, and_word)} {forms[-1]}")

        return " ".join(words)

    def conjunctive_segment(self, value: int, and_word: str, units: bool = False) -> str:
        """Words for 1..999; inside the units segment only the ones digit is linked."""
        ones, tens, hundreds = place_values(value)
        parts: list[str] = []
        if hundreds > 0:
            parts.append(self.hundreds[hundreds])

        if tens == 1:
            parts.append(_link(self.teens[ones], and_word, bool(parts) and not units))
        else:
            if tens > 1:
                parts.append(_link(self.tens[tens], and_word, bool(parts) and not units))
            if ones > 0:
                parts.append(_link(self.ones[ones], and_word, bool(parts)))
        return " ".join(parts)


def _link(word: str, and_word: str, linked: bool) -> str:
    return and_word + word if linked else word
