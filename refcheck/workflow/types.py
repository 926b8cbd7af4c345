"""Workflow data types for batch reference validation.

All types: @final @dataclass(frozen=True, slots=True). They travel through
REFCHECK_DATA_CONVERTER, which writes CheckStatus members as their value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import final


class CheckStatus(Enum):
    """Outcome of one request.  Exhaustive."""

    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    UNKNOWN_FORMAT = "UnknownFormat"


@final
@dataclass(frozen=True, slots=True)
class ReferenceCheckRequest:
    """One candidate and the name of the format to check it against."""

    reference_type: str
    reference: str


@final
@dataclass(frozen=True, slots=True)
class ReferenceCheckOutcome:
    reference_type: str
    reference: str
    status: CheckStatus
    accepted: str | None = None  # set only when status is ACCEPTED

    def __post_init__(self) -> None:
        if (self.status is CheckStatus.ACCEPTED) != (self.accepted is not None):
            raise TypeError(
                f"ReferenceCheckOutcome: accepted must be set exactly when "
                f"status is ACCEPTED, got status={self.status.value}"
            )


@final
@dataclass(frozen=True, slots=True)
class CheckReferencesInput:
    """Activity input. `as_of` is the clock for date-gated formats."""

    requests: tuple[ReferenceCheckRequest, ...]
    as_of: datetime

    def __post_init__(self) -> None:
        if self.as_of.tzinfo is None:
            raise TypeError("CheckReferencesInput.as_of must be timezone-aware")


@final
@dataclass(frozen=True, slots=True)
class CheckReferencesOutput:
    outcomes: tuple[ReferenceCheckOutcome, ...]


@final
@dataclass(frozen=True, slots=True)
class BatchCheckInput:
    """Workflow input.  batch_id doubles as the Temporal workflow ID."""

    batch_id: str
    requests: tuple[ReferenceCheckRequest, ...]
    chunk_size: int = 500
    check_timeout_seconds: float = 30.0  # start-to-close, per chunk

    def __post_init__(self) -> None:
        if not self.batch_id:
            raise TypeError("BatchCheckInput.batch_id must be non-empty")
        if self.chunk_size <= 0:
            raise TypeError(f"BatchCheckInput.chunk_size must be > 0, got {self.chunk_size}")
        if self.check_timeout_seconds <= 0:
            raise TypeError("BatchCheckInput.check_timeout_seconds must be positive")


@final
@dataclass(frozen=True, slots=True)
class BatchCheckResult:
    batch_id: str
    as_of: datetime
    outcomes: tuple[ReferenceCheckOutcome, ...]

    @property
    def accepted_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status is CheckStatus.ACCEPTED)

    @property
    def rejected_count(self) -> int:
        return len(self.outcomes) - self.accepted_count
