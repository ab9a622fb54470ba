"""
Language configuration records.

A language is data, not a subclass: a merge engine (greedy or inflected
profile) plus the words and separators the assembler needs, the options
model that validates per-call options, and two optional hooks.

Variants are derived from a preset with `dataclasses.replace`:

    UKRAINIAN = replace(RUSSIAN, code="uk", name="Ukrainian", engine=..., zero_word="нуль")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Type, Union

from pydantic import ValidationError

from .exceptions import UnsupportedOption, VocabularyError
from .greedy import GreedyProfile
from .inflected import InflectedProfile
from .models import ConversionOptions, DecimalMode

Engine = Union[GreedyProfile, InflectedProfile]

# Picks the engine for a call (e.g. formal vs. everyday Chinese numerals)
EngineSelector = Callable[[ConversionOptions], Engine]

# Spells a positive integer as an ordinal (21 -> "twenty-first")
OrdinalHook = Callable[[int, ConversionOptions], str]


@dataclass(frozen=True)
class Language:
    """Everything needed to spell numbers in one language."""

    code: str
    name: str
    engine: Engine
    zero_word: str
    negative_word: str
    decimal_word: str
    joiner: str = " "
    separator_joiner: Optional[str] = None
    decimal_mode: DecimalMode = DecimalMode.GROUPED
    options_model: Type[ConversionOptions] = ConversionOptions
    max_digits: Optional[int] = None
    engine_for: Optional[EngineSelector] = None
    ordinal: Optional[OrdinalHook] = None
    ordinal_max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.zero_word:
            raise VocabularyError(f"{self.code}: zero word must not be empty", {"lang": self.code})
        if self.max_digits is None and not isinstance(self.engine, InflectedProfile):
            raise VocabularyError(
                f"{self.code}: greedy languages must declare max_digits",
                {"lang": self.code},
            )

    # ── Derived ─────────────────────────────────────────────────────

    @property
    def digit_limit(self) -> int:
        """Maximum number of integer digits this language can name."""
        if self.max_digits is not None:
            return self.max_digits
        assert isinstance(self.engine, InflectedProfile)
        return self.engine.max_digits

    @property
    def ordinal_digit_limit(self) -> int:
        """Maximum number of digits the ordinal forms can name."""
        if self.ordinal_max_digits is None:
            return self.digit_limit
        return min(self.ordinal_max_digits, self.digit_limit)

    @property
    def option_names(self) -> list[str]:
        return sorted(self.options_model.model_fields)

    @property
    def supports_ordinals(self) -> bool:
        return self.ordinal is not None

    # ── Per-call helpers ────────────────────────────────────────────

    def parse_options(self, options: Union[None, Mapping[str, Any], ConversionOptions]) -> ConversionOptions:
        """Validate caller options against this language's options model.

        Unknown keys are ignored; a wrong value for a known key raises
        UnsupportedOption.
        """
        if options is None:
            return self.options_model()
        if isinstance(options, self.options_model):
            return options
        if isinstance(options, ConversionOptions):
            options = options.model_dump()
        if not isinstance(options, Mapping):
            raise UnsupportedOption(
                f"Options must be a mapping, received {type(options).__name__}",
                {"type": type(options).__name__},
            )
        try:
            return self.options_model.model_validate(dict(options))
        except ValidationError as exc:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ]
            raise UnsupportedOption(
                f"Invalid options for {self.code}: {errors[0]['field']} ({errors[0]['message']})",
                {"lang": self.code, "errors": errors},
            ) from exc

    def select_engine(self, options: ConversionOptions) -> Engine:
        if self.engine_for is not None:
            return self.engine_for(options)
        return self.engine

    def integer_to_words(self, n: int, options: ConversionOptions) -> str:
        """Words for a non-negative integer; 0 is always the zero word."""
        if n == 0:
            return self.zero_word
        return self.select_engine(options).to_words(n, options)
