"""FormatConfig: the immutable description of one reference format.

Format variants are data, not subclasses. `scheme` picks how the expected
check characters are derived; `delegation` and `embedded_date` switch on the
composite steps in refcheck.engine.composite.

Invariant violations raise TypeError at construction, so a broken catalog
entry fails at import time rather than during validation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, final

from refcheck.formats.alpha import NO_ALPHA, AlphaValue


class CheckScheme(Enum):
    """How the remainder becomes the expected check character(s)."""

    TABLE_LOOKUP = "TableLookup"  # check_alphabet[remainder], one character
    COMPLEMENT = "Complement"     # f"{modulus - remainder:02d}", two digits
    NONE = "None"                 # structure only, no checksum

    @property
    def width(self) -> int:
        """Number of check characters the scheme produces."""
        return {"TableLookup": 1, "Complement": 2, "None": 0}[self.value]


def compile_pattern(text: str) -> re.Pattern[str]:
    """Compile a structural pattern once, with ASCII character classes."""
    return re.compile(text, re.ASCII)


@final
@dataclass(frozen=True, slots=True)
class Delegation:
    """Reformat-and-delegate rule.

    The candidate is cut at `slices`, joined with `separator`, and handed to
    each of `targets` in turn. The first target to accept wins.
    """

    slices: tuple[tuple[int, int], ...]
    targets: tuple[FormatConfig, ...]
    separator: str = " "

    def __post_init__(self) -> None:
        if not self.slices:
            raise TypeError("Delegation requires at least one slice")
        if not self.targets:
            raise TypeError("Delegation requires at least one target format")
        for start, end in self.slices:
            if start < 0 or end <= start:
                raise TypeError(f"Delegation: invalid slice ({start}, {end})")

    @property
    def span(self) -> int:
        """Smallest candidate length the slices can be cut from."""
        return max(end for _, end in self.slices)

    def reformat(self, candidate: str) -> str:
        return self.separator.join(candidate[start:end] for start, end in self.slices)


@final
@dataclass(frozen=True, slots=True)
class EmbeddedDate:
    """A DDMMYY date inside the reference that must lie in the past."""

    start: int
    two_digit_year_max: int = 2049

    WIDTH: ClassVar[int] = 6

    def __post_init__(self) -> None:
        if self.start < 0:
            raise TypeError(f"EmbeddedDate.start must be >= 0, got {self.start}")
        if self.two_digit_year_max < 1000:
            raise TypeError(
                f"EmbeddedDate.two_digit_year_max must be a 4-digit year, "
                f"got {self.two_digit_year_max}"
            )

    def extract(self, candidate: str) -> str:
        return candidate[self.start:self.start + self.WIDTH]


@final
@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Everything the engine needs to validate one reference format."""

    name: str
    pattern: re.Pattern[str]
    expected_length: int = 0  # 0 = not length-gated, pattern decides
    scheme: CheckScheme = CheckScheme.NONE
    weights: tuple[int, ...] = ()
    check_alphabet: str = ""
    check_position: int = 0
    modulus: int = 0
    initial_weight: int = 0
    alpha_value: AlphaValue = field(default=NO_ALPHA)
    ignored_characters: str = ""  # removed before the checksum is computed
    delegation: Delegation | None = None
    embedded_date: EmbeddedDate | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise TypeError("FormatConfig.name must be non-empty")
        if self.expected_length < 0:
            raise TypeError(
                f"{self.name}: expected_length must be >= 0, got {self.expected_length}"
            )
        if self.scheme is CheckScheme.NONE:
            if any(self.weights):
                raise TypeError(f"{self.name}: structure-only formats take no weights")
        else:
            self._check_checksum_invariants()
        if self.embedded_date is not None and self.is_length_gated:
            end = self.embedded_date.start + EmbeddedDate.WIDTH
            if end > self.expected_length:
                raise TypeError(
                    f"{self.name}: embedded date ends at {end}, "
                    f"past expected_length {self.expected_length}"
                )

    def _check_checksum_invariants(self) -> None:
        if self.modulus <= 0:
            raise TypeError(f"{self.name}: modulus must be > 0, got {self.modulus}")
        if not self.weights:
            raise TypeError(f"{self.name}: a checksum needs a weight vector")
        if self.scheme is CheckScheme.TABLE_LOOKUP and len(self.check_alphabet) < self.modulus:
            raise TypeError(
                f"{self.name}: check_alphabet has {len(self.check_alphabet)} characters, "
                f"modulus {self.modulus} needs at least that many"
            )
        if self.scheme is CheckScheme.COMPLEMENT and self.modulus >= 100:
            raise TypeError(
                f"{self.name}: complement check needs modulus < 100 "
                f"to fit {self.scheme.width} digits, got {self.modulus}"
            )
        if self.is_length_gated:
            if len(self.weights) > self.expected_length:
                raise TypeError(
                    f"{self.name}: {len(self.weights)} weights for a "
                    f"{self.expected_length}-character reference"
                )
            if self.check_position + self.scheme.width > self.expected_length:
                raise TypeError(
                    f"{self.name}: check_position {self.check_position} "
                    f"lies outside expected_length {self.expected_length}"
                )

    @property
    def is_length_gated(self) -> bool:
        return self.expected_length > 0

    @property
    def has_checksum(self) -> bool:
        return self.scheme is not CheckScheme.NONE
