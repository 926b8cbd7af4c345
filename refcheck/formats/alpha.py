"""Alpha-to-numeric conversions for non-digit characters.

Call contract: convert(character, weight) -> weighted contribution.
The conversion decides whether the position weight applies, because the
national algorithms disagree: the SAFE and NTCR tables multiply the letter
value by the weight, PAYE adds a flat 41 for a trailing X.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol, final, runtime_checkable

from refcheck.core.numeric import is_numeric
from refcheck.core.result import unwrap
from refcheck.core.types import FrozenMap


@runtime_checkable
class AlphaValue(Protocol):
    """Maps a non-digit character at a weighted position to its contribution."""

    def __call__(self, character: str, weight: int) -> int: ...


@final
@dataclass(frozen=True, slots=True)
class NoAlphaValue:
    """Letters never contribute."""

    def __call__(self, character: str, weight: int) -> int:  # noqa: ARG002
        return 0


@final
@dataclass(frozen=True, slots=True)
class ConstantAlphaValue:
    """Any non-digit contributes a fixed amount; the weight is not applied."""

    value: int

    def __call__(self, character: str, weight: int) -> int:  # noqa: ARG002
        return self.value


@final
@dataclass(frozen=True, slots=True)
class LetterTable:
    """Letter value from a table, multiplied by the position weight.

    Case-insensitive. Characters outside the table count as 0.
    """

    values: FrozenMap[str, int]

    def __call__(self, character: str, weight: int) -> int:
        if is_numeric(character):
            return 0
        return (self.values.get(character.upper()) or 0) * weight


def _letter_values(excluded: str = "") -> FrozenMap[str, int]:
    # A=33 ... Z=58; excluded letters are absent, not renumbered
    return unwrap(FrozenMap.create({
        letter: 33 + offset
        for offset, letter in enumerate(string.ascii_uppercase)
        if letter not in excluded
    }))


SAFE_LETTER_VALUES: FrozenMap[str, int] = _letter_values()

# NTCR prefixes never use D, F, I, O, Q, U or V
NTCR_LETTER_VALUES: FrozenMap[str, int] = _letter_values(excluded="DFIOQUV")

NO_ALPHA = NoAlphaValue()
