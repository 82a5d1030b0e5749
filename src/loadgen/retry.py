"""Fixed-delay retry policy for transport calls."""
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Tuple, Type

import httpx

from src.const import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY


# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior."""
    max_attempts: int = DEFAULT_RETRY_ATTEMPTS
    delay: float = DEFAULT_RETRY_DELAY  # constant, seconds
    retry_on: Tuple[Type[BaseException], ...] = (httpx.TransportError,)


class FixedDelayRetrier:
    """Runs a callable up to max_attempts times with a constant pause between attempts.

    Only exceptions listed in retry_on are retried; anything else propagates
    immediately. When every attempt fails the last exception is re-raised.
    """

    def __init__(self, config: RetryConfig = RetryConfig(), sleep: Callable[[float], None] = time.sleep):
        if config.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {config.max_attempts}")
        self.config = config
        self._sleep = sleep

    def run(self, func: Callable, *args, **kwargs) -> Any:
        """Execute func with retries.

        Args:
            func: Function to execute
            *args: Positional arguments for the function
            **kwargs: Keyword arguments for the function

        Returns:
            Result of the first successful call

        Raises:
            Exception: The last retryable exception once attempts are exhausted,
                or any non-retryable exception as soon as it occurs
        """
        attempt = 1
        while True:
            try:
                return func(*args, **kwargs)
            except self.config.retry_on as e:
                if attempt >= self.config.max_attempts:
                    raise
                logger.debug(
                    f"Attempt {attempt}/{self.config.max_attempts} failed: {e!r}, "
                    f"retrying in {self.config.delay}s"
                )
                attempt += 1
                if self.config.delay > 0:
                    self._sleep(self.config.delay)
