"""Failure-threshold breaker shared by the tasks of a batch.

The breaker counts failed logical requests. It opens once the count exceeds
the threshold, or immediately when a task reports a fatal condition. Once
open it stays open for the rest of the batch.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .models import AbortCause


# Configure logging
logger = logging.getLogger(__name__)


class BreakerState(Enum):
    """Breaker states."""
    CLOSED = "closed"  # Dispatch continues
    OPEN = "open"      # Dispatch must stop


@dataclass
class FailureBreakerMetrics:
    """Counters kept by the breaker."""
    failed_requests: int = 0
    fatal_reports: int = 0


class FailureBreaker:
    """Race-safe failure counter with a soft abort threshold."""

    def __init__(self, threshold: int, name: str = "default"):
        """Initialize the breaker.

        Args:
            threshold: Failures tolerated; the breaker opens when the count exceeds it
            name: Breaker name for logging
        """
        if threshold < 0:
            raise ValueError(f"threshold must not be negative, got {threshold}")
        self.threshold = threshold
        self.name = name
        self._state = BreakerState.CLOSED
        self._lock = threading.Lock()
        self._metrics = FailureBreakerMetrics()
        self._cause: Optional[AbortCause] = None
        self._reason: Optional[str] = None

    @property
    def state(self) -> BreakerState:
        with self._lock:
            return self._state

    @property
    def is_open(self) -> bool:
        return self.state == BreakerState.OPEN

    @property
    def failure_count(self) -> int:
        with self._lock:
            return self._metrics.failed_requests

    @property
    def cause(self) -> Optional[AbortCause]:
        with self._lock:
            return self._cause

    @property
    def reason(self) -> Optional[str]:
        with self._lock:
            return self._reason

    @property
    def metrics(self) -> FailureBreakerMetrics:
        with self._lock:
            return FailureBreakerMetrics(**self._metrics.__dict__)

    def _open(self, cause: AbortCause, reason: str) -> None:
        """Open the breaker. Caller holds the lock; the first cause wins."""
        if self._state == BreakerState.OPEN:
            return
        self._state = BreakerState.OPEN
        self._cause = cause
        self._reason = reason
        logger.error(f"Breaker '{self.name}' opened: {reason}")

    def record_failure(self) -> int:
        """Count one failed logical request.

        Returns:
            The failure count after this increment
        """
        with self._lock:
            self._metrics.failed_requests += 1
            count = self._metrics.failed_requests
            if count > self.threshold:
                self._open(AbortCause.THRESHOLD_BREACHED, f"Failed over {self.threshold} requests, aborting")
            return count

    def trip(self, reason: str, cause: AbortCause = AbortCause.UNEXPECTED_STATUS) -> None:
        """Open the breaker immediately for a fatal condition."""
        with self._lock:
            self._metrics.fatal_reports += 1
            self._open(cause, reason)

    def get_status(self) -> Dict[str, Any]:
        """Get the breaker's state and counters."""
        with self._lock:
            return {
                "name": self.name,
                "state": self._state.value,
                "threshold": self.threshold,
                "cause": self._cause.value if self._cause else None,
                "reason": self._reason,
                "metrics": {
                    "failed_requests": self._metrics.failed_requests,
                    "fatal_reports": self._metrics.fatal_reports,
                },
            }
