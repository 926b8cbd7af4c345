"""Durable workflow that validates a batch of references.

Determinism contract: the only notion of "now" is workflow.now(), read
once and handed to every activity call as `as_of`. Date-gated formats
therefore give the same answer on replay.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy

with workflow.unsafe.imports_passed_through():
    from refcheck.workflow.activities import check_references
    from refcheck.workflow.types import (
        BatchCheckInput,
        BatchCheckResult,
        CheckReferencesInput,
        ReferenceCheckOutcome,
        ReferenceCheckRequest,
    )

# Validation is deterministic: a failed attempt would fail again
CHECK_RETRY = RetryPolicy(maximum_attempts=1)


def chunked(
    requests: tuple[ReferenceCheckRequest, ...], size: int,
) -> Iterator[tuple[ReferenceCheckRequest, ...]]:
    """Consecutive slices of at most `size` requests, in order."""
    for start in range(0, len(requests), size):
        yield requests[start:start + size]


@workflow.defn(name="ReferenceBatch")
class ReferenceBatchWorkflow:
    """Validate every request in a batch; one outcome per request, in order."""

    def __init__(self) -> None:
        self._checked: int = 0

    @workflow.query
    def checked_count(self) -> int:
        return self._checked

    @workflow.run
    async def run(self, inp: BatchCheckInput) -> BatchCheckResult:
        as_of = workflow.now()
        workflow.logger.info(
            "Batch %s: %d references as of %s",
            inp.batch_id, len(inp.requests), as_of.isoformat(),
        )

        timeout = timedelta(seconds=inp.check_timeout_seconds)
        outcomes: list[ReferenceCheckOutcome] = []
        for chunk in chunked(inp.requests, inp.chunk_size):
            output = await workflow.execute_activity(
                check_references,
                CheckReferencesInput(requests=chunk, as_of=as_of),
                start_to_close_timeout=timeout,
                retry_policy=CHECK_RETRY,
            )
            outcomes.extend(output.outcomes)
            self._checked = len(outcomes)

        return BatchCheckResult(batch_id=inp.batch_id, as_of=as_of, outcomes=tuple(outcomes))
