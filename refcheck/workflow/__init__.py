"""refcheck.workflow — batch reference validation on Temporal.

Workflow: ReferenceBatchWorkflow (captures workflow.now() once per batch)
Activity: check_references (pure validation of one chunk)
Types:    BatchCheckInput, BatchCheckResult, ReferenceCheckRequest, ...
Worker:   run_worker, submit_batch
Converter: REFCHECK_DATA_CONVERTER (pass to Client.connect)
"""

from refcheck.workflow.activities import check_references as check_references
from refcheck.workflow.activities import evaluate_request as evaluate_request
from refcheck.workflow.batch_workflow import ReferenceBatchWorkflow as ReferenceBatchWorkflow
from refcheck.workflow.batch_workflow import chunked as chunked
from refcheck.workflow.converter import REFCHECK_DATA_CONVERTER as REFCHECK_DATA_CONVERTER
from refcheck.workflow.types import BatchCheckInput as BatchCheckInput
from refcheck.workflow.types import BatchCheckResult as BatchCheckResult
from refcheck.workflow.types import CheckReferencesInput as CheckReferencesInput
from refcheck.workflow.types import CheckReferencesOutput as CheckReferencesOutput
from refcheck.workflow.types import CheckStatus as CheckStatus
from refcheck.workflow.types import ReferenceCheckOutcome as ReferenceCheckOutcome
from refcheck.workflow.types import ReferenceCheckRequest as ReferenceCheckRequest
from refcheck.workflow.worker import batch_input as batch_input
from refcheck.workflow.worker import run_worker as run_worker
from refcheck.workflow.worker import submit_batch as submit_batch
