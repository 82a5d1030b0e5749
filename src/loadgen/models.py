"""Data models for the load generator."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.const import HTTP_GET
from .exceptions import BatchAbortedError


@dataclass(frozen=True)
class RequestDescriptor:
    """A single request to issue against the target server."""
    url: str
    method: str = HTTP_GET


@dataclass(frozen=True)
class RunReport:
    """Aggregate timing and failures of one batch."""
    workload: str
    pool_size: int
    total_requests: int
    total_duration: float  # seconds
    mean_duration: float  # seconds per request
    failure_count: int


class BatchState(Enum):
    """Lifecycle states of a batch."""
    INITIALIZING = "initializing"
    DISPATCHING = "dispatching"
    DRAINING = "draining"
    COMPLETED = "completed"
    ABORTED = "aborted"


class AbortCause(Enum):
    """Reasons a batch stops dispatching early."""
    THRESHOLD_BREACHED = "threshold_breached"
    UNEXPECTED_STATUS = "unexpected_status"


@dataclass(frozen=True)
class BatchResult:
    """Terminal outcome of a batch."""
    workload: str
    state: BatchState
    report: RunReport
    dispatched: int
    abort_cause: Optional[AbortCause] = None
    reason: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.state == BatchState.COMPLETED

    def raise_for_status(self) -> "BatchResult":
        """Return self for a completed batch, raise BatchAbortedError otherwise."""
        if not self.completed:
            raise BatchAbortedError(self)
        return self
