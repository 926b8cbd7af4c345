"""Rejection value returned by every validator.

A rejection deliberately carries no reason. Wrong length, pattern mismatch,
checksum mismatch, bad embedded date and failed delegation all look the
same to the caller. Use the sub-steps in refcheck.engine.checksum to find
out which one failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from refcheck.core.result import Err, Result


@final
@dataclass(frozen=True, slots=True)
class Rejection:
    """A candidate that is not a valid instance of a format."""

    format_name: str
    reference: str | None

    def __str__(self) -> str:
        return f"{self.reference!r} is not a valid {self.format_name} reference"


type ValidationResult = Result[str, Rejection]


def reject(format_name: str, reference: str | None) -> Err[Rejection]:
    """Build the single rejection outcome."""
    return Err(Rejection(format_name=format_name, reference=reference))
