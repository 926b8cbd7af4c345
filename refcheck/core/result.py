"""Result[T, E] for reference validation.

A validator never raises for bad input. It returns Ok(accepted_reference)
or Err(rejection). Err.or_else lets a composite validator fall through to
a sibling format before giving up.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Accepted outcome."""

    value: T

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a further check that may itself reject."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Already accepted: the fallback is never tried."""
        return self


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Rejected outcome."""

    error: E

    def bind(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Short-circuits: later checks never run on a rejection."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Try an alternative, given the current rejection."""
        return f(self.error)


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")

