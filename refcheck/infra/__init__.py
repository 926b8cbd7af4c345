"""refcheck.infra — worker configuration."""

from refcheck.infra.config import TASK_QUEUE as TASK_QUEUE
from refcheck.infra.config import WorkerConfig as WorkerConfig
from refcheck.infra.config import configure_logging as configure_logging
