"""Handles individual request execution and timing."""
import time
import logging
from typing import Optional

import httpx

from src.const import MAX_DIAGNOSTIC_BODY_LENGTH
from .models import RequestDescriptor
from .retry import FixedDelayRetrier
from .exceptions import RequestError, UnexpectedStatusError


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Executes one request on a borrowed client and classifies the outcome."""

    def __init__(self, retrier: FixedDelayRetrier, expected_status: Optional[int] = None):
        """
        Args:
            retrier: Retry policy applied to the transport call.
            expected_status: Exact status to accept. None accepts any 2xx.
        """
        self.retrier = retrier
        self.expected_status = expected_status

    def is_expected(self, status_code: int) -> bool:
        if self.expected_status is not None:
            return status_code == self.expected_status
        return 200 <= status_code < 300

    def execute(self, client: httpx.Client, descriptor: RequestDescriptor) -> float:
        """
        Send a request and measure its latency, retries included.

        Args:
            client: Pooled client, owned by the caller for the duration of the call.
            descriptor: Method and URL to request.

        Returns:
            Latency in seconds.

        Raises:
            RequestError: If every attempt failed at the transport level, or the
                response could not be read (bad encoding, redirect loop).
            UnexpectedStatusError: If a response arrived with a status that is not accepted.
        """
        start_time = time.perf_counter()
        try:
            # Non-streaming requests read the body and hand the connection back to the client
            response = self.retrier.run(client.request, descriptor.method, descriptor.url)
        except httpx.TransportError as e:
            logger.warning(f"Request failed after {self.retrier.config.max_attempts} attempts: {e!r}")
            raise RequestError(f"{descriptor.method} {descriptor.url} failed") from e
        except httpx.RequestError as e:
            # Bad response content or redirect loops, not retried
            logger.warning(f"Request failed: {e!r}")
            raise RequestError(f"{descriptor.method} {descriptor.url} failed") from e

        if not self.is_expected(response.status_code):
            body = response.text[:MAX_DIAGNOSTIC_BODY_LENGTH]
            raise UnexpectedStatusError(response.status_code, body, url=descriptor.url)

        end_time = time.perf_counter()
        return end_time - start_time
