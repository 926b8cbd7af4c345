"""Worker that hosts the batch validation workflow and its activity.

Usage::

    import asyncio
    from refcheck.workflow.worker import run_worker

    asyncio.run(run_worker())
"""

from __future__ import annotations

import logging

from temporalio.client import Client
from temporalio.worker import Worker

from refcheck.infra.config import WorkerConfig, configure_logging
from refcheck.workflow.activities import check_references
from refcheck.workflow.batch_workflow import ReferenceBatchWorkflow
from refcheck.workflow.converter import REFCHECK_DATA_CONVERTER
from refcheck.workflow.types import BatchCheckInput, BatchCheckResult, ReferenceCheckRequest

logger = logging.getLogger(__name__)


def build_worker(client: Client, config: WorkerConfig) -> Worker:
    """Worker with the batch workflow and check activity registered."""
    return Worker(
        client,
        task_queue=config.task_queue,
        workflows=[ReferenceBatchWorkflow],
        activities=[check_references],
    )


def batch_input(
    batch_id: str,
    requests: tuple[ReferenceCheckRequest, ...],
    config: WorkerConfig,
) -> BatchCheckInput:
    """Workflow input carrying the configured chunk size and timeout."""
    return BatchCheckInput(
        batch_id=batch_id,
        requests=requests,
        chunk_size=config.chunk_size,
        check_timeout_seconds=config.activity_timeout.total_seconds(),
    )


async def submit_batch(
    client: Client,
    batch_id: str,
    requests: tuple[ReferenceCheckRequest, ...],
    config: WorkerConfig | None = None,
) -> BatchCheckResult:
    """Run one batch to completion. batch_id is used as the workflow ID.

    `client` must be connected with REFCHECK_DATA_CONVERTER.
    """
    config = config or WorkerConfig()
    logger.info("Submitting batch %s (%d references)", batch_id, len(requests))
    return await client.execute_workflow(
        ReferenceBatchWorkflow.run,
        batch_input(batch_id, requests, config),
        id=batch_id,
        task_queue=config.task_queue,
    )


async def run_worker(config: WorkerConfig | None = None) -> None:
    """Connect to Temporal and run the worker until interrupted."""
    config = config or WorkerConfig()
    configure_logging(config)

    client = await Client.connect(
        config.target_host, namespace=config.namespace,
        data_converter=REFCHECK_DATA_CONVERTER,
    )
    logger.info(
        "Worker polling %s on %s/%s", config.task_queue, config.target_host, config.namespace,
    )
    await build_worker(client, config).run()
