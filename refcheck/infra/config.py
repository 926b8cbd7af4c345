"""Worker configuration for hosting batch validation on Temporal.

Pure configuration data. No client library is imported here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import final

TASK_QUEUE: str = "refcheck-validation"


@final
@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Temporal connection and batching settings."""

    target_host: str = "localhost:7233"
    namespace: str = "default"
    task_queue: str = TASK_QUEUE
    chunk_size: int = 500  # references per activity call
    activity_timeout: timedelta = timedelta(seconds=30)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise TypeError(f"WorkerConfig.chunk_size must be > 0, got {self.chunk_size}")
        if self.activity_timeout <= timedelta(0):
            raise TypeError("WorkerConfig.activity_timeout must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise TypeError(f"WorkerConfig.log_level: unknown level {self.log_level!r}")


def configure_logging(config: WorkerConfig) -> None:
    """Root logger setup for a worker process."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
