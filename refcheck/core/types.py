"""Core types: Clock, FrozenMap.

Clock is the only door to wall-clock time. Date-gated validators take one
as a parameter; tests and Temporal workflows pass a fixed instant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import final

from refcheck.core.result import Err, Ok

type Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current UTC time. The default Clock."""
    return datetime.now(tz=UTC)


def fixed_clock(at: datetime) -> Clock:
    """A Clock that always reports `at`."""

    def _clock() -> datetime:
        return at

    return _clock


@final
@dataclass(frozen=True, slots=True)
class FrozenMap[K, V]:
    """Immutable mapping with deterministic (sorted) iteration order.

    Used for the per-format letter tables and the format catalog, which are
    built once at import time and shared by every validation call.
    """

    _entries: tuple[tuple[K, V], ...]

    @staticmethod
    def create(items: dict[K, V] | Iterable[tuple[K, V]]) -> Ok[FrozenMap[K, V]] | Err[str]:
        """Build from a dict or (key, value) pairs; later duplicates win."""
        d = items if isinstance(items, dict) else dict(items)
        try:
            entries = tuple(sorted(d.items(), key=lambda kv: kv[0]))
        except TypeError as e:
            return Err(f"FrozenMap keys must be comparable: {e}")
        return Ok(FrozenMap(_entries=entries))

    def get(self, key: K, default: V | None = None) -> V | None:
        for k, v in self._entries:
            if k == key:
                return v
        return default

    def __getitem__(self, key: K) -> V:
        for k, v in self._entries:
            if k == key:
                return v
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._entries)

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> tuple[tuple[K, V], ...]:
        return self._entries

