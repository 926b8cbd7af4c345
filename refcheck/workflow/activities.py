"""Activity implementation for batch reference validation.

The activity is a thin wrapper: all logic lives in refcheck.engine.
It never reads the system clock; the workflow supplies `as_of`, so the
same input always produces the same output.
"""

from __future__ import annotations

from temporalio import activity

from refcheck.core.errors import Rejection
from refcheck.core.result import Err, Ok
from refcheck.core.types import Clock, fixed_clock
from refcheck.engine.composite import check_by_name
from refcheck.workflow.types import (
    CheckReferencesInput,
    CheckReferencesOutput,
    CheckStatus,
    ReferenceCheckOutcome,
    ReferenceCheckRequest,
)


def evaluate_request(request: ReferenceCheckRequest, clock: Clock) -> ReferenceCheckOutcome:
    """Run one request through the catalog and summarise the result."""
    match check_by_name(request.reference_type, request.reference, clock=clock):
        case Ok(value):
            return ReferenceCheckOutcome(
                reference_type=request.reference_type,
                reference=request.reference,
                status=CheckStatus.ACCEPTED,
                accepted=value,
            )
        case Err(Rejection()):
            status = CheckStatus.REJECTED
        case _:
            status = CheckStatus.UNKNOWN_FORMAT
    return ReferenceCheckOutcome(
        reference_type=request.reference_type,
        reference=request.reference,
        status=status,
    )


@activity.defn(name="check_references")
async def check_references(inp: CheckReferencesInput) -> CheckReferencesOutput:
    """Validate a chunk of references as of `inp.as_of`.

    Retries: none (validation is deterministic)
    Idempotent: yes (pure function of input)
    """
    activity.logger.info(
        "Checking %d references as of %s", len(inp.requests), inp.as_of.isoformat(),
    )
    clock = fixed_clock(inp.as_of)
    outcomes = tuple(evaluate_request(r, clock) for r in inp.requests)

    unknown = sum(1 for o in outcomes if o.status is CheckStatus.UNKNOWN_FORMAT)
    if unknown:
        activity.logger.warning("%d requests named an unknown reference format", unknown)
    return CheckReferencesOutput(outcomes=outcomes)
