"""
Split an integer digit string into positional segments.

Three grouping schemes are supported:

    THOUSANDS  1,234,567       -> ["1", "234", "567"]
    MYRIAD     1,2345,6789     -> ["1", "2345", "6789"]
    INDIAN     12,34,567       -> ["12", "34", "567"]   (3 digits, then pairs)

Segments are returned most-significant first. `scale_index` 0 is always the
least significant segment, so a segment's scale word is looked up by index
regardless of how many segments precede it.

Invariant: "".join(s.digits for s in segments) == original digit string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Grouping(Enum):
    """Digit grouping scheme used to cut an integer into segments."""

    THOUSANDS = 3
    MYRIAD = 4
    INDIAN = "3-2"


@dataclass(frozen=True)
class Segment:
    """One digit group and its position (0 = least significant)."""

    digits: str
    scale_index: int

    @property
    def value(self) -> int:
        return int(self.digits)


# ─── Decomposition ───────────────────────────────────────────────────


def decompose(digits: str, group_size: int) -> list[Segment]:
    """Cut `digits` into fixed-size groups, the leading group may be shorter.

    Example:
        decompose("1234567", 3) -> [Segment("1", 2), Segment("234", 1), Segment("567", 0)]
    """
    if group_size < 1:
        raise ValueError(f"group_size must be positive, got {group_size}")
    if not digits:
        return []

    lead = len(digits) % group_size or group_size
    chunks = [digits[:lead]]
    chunks.extend(digits[i : i + group_size] for i in range(lead, len(digits), group_size))
    return _indexed(chunks)


def decompose_indian(digits: str) -> list[Segment]:
    """Last three digits form segment 0; the rest is grouped in pairs."""
    if len(digits) <= 3:
        return _indexed([digits]) if digits else []

    head, tail = digits[:-3], digits[-3:]
    return _indexed([seg.digits for seg in decompose(head, 2)] + [tail])


def split_segments(digits: str, grouping: Grouping = Grouping.THOUSANDS) -> list[Segment]:
    """Decompose `digits` under the given grouping scheme."""
    if grouping is Grouping.INDIAN:
        return decompose_indian(digits)
    return decompose(digits, grouping.value)


def place_values(value: int) -> tuple[int, int, int]:
    """Return (ones, tens, hundreds) of a 0..999 segment value."""
    return value % 10, (value // 10) % 10, (value // 100) % 10


# ─── Internals ───────────────────────────────────────────────────────


def _indexed(chunks: list[str]) -> list[Segment]:
    last = len(chunks) - 1
    return [Segment(chunk, last - i) for i, chunk in enumerate(chunks)]
