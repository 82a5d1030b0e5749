"""Drives one batch of concurrent logical requests."""
import logging
import time
import concurrent.futures
from typing import Callable, List, Optional

import httpx

from src.shared.config import Config
from src.shared.httpx_util import HTTPXUtil
from .client_pool import ClientPool
from .exceptions import RequestError, UnexpectedStatusError
from .failure_breaker import FailureBreaker
from .models import BatchResult, BatchState, RequestDescriptor
from .report_analyzer import ReportAnalyzer
from .request_executor import RequestExecutor
from .retry import FixedDelayRetrier, RetryConfig
from .workloads import WorkloadProducer


# Configure logging
logger = logging.getLogger(__name__)


class BatchCoordinator:
    """Runs every logical request of one workload against a bounded client pool.

    Dispatch is sequential and bounded only by client availability: a request
    is submitted as soon as a client can be borrowed, and the client goes back
    to the pool when the request's task finishes. Failures feed a breaker; once
    it opens no further request is dispatched, in-flight requests drain and the
    batch ends ABORTED.

    A coordinator owns its pool and breaker and runs a single batch.
    """

    def __init__(self, config: Config, workload: WorkloadProducer,
                 client_factory: Optional[Callable[[], httpx.Client]] = None,
                 request_executor: Optional[RequestExecutor] = None):
        self.config = config
        self.workload = workload
        self.client_factory = client_factory or self._default_client_factory
        self.request_executor = request_executor or RequestExecutor(
            FixedDelayRetrier(RetryConfig(max_attempts=config.retry_attempts, delay=config.retry_delay)),
            expected_status=config.expected_status,
        )
        self.total_requests = workload.total_requests(config.pool_size, config.requests_per_client)
        self.breaker = FailureBreaker(config.failure_threshold, name=workload.name)
        self.pool: Optional[ClientPool] = None
        self._state = BatchState.INITIALIZING

    @property
    def state(self) -> BatchState:
        return self._state

    def _default_client_factory(self) -> httpx.Client:
        return HTTPXUtil.create_client(self.config.request_timeout, self.config.max_keepalive_connections)

    def _change_state(self, new_state: BatchState) -> None:
        logger.info(f"Batch '{self.workload.name}' state changed: {self._state.value} -> {new_state.value}")
        self._state = new_state

    def run(self) -> BatchResult:
        """
        Run the batch to completion or abort.

        Returns:
            BatchResult with the run report. The state is ABORTED when the
            failure threshold was exceeded or a fatal status was received.

        Raises:
            RuntimeError: If run() is called a second time.
            Exception: Any unexpected error raised inside a request task,
                re-raised once every dispatched task has finished.
        """
        if self._state != BatchState.INITIALIZING:
            raise RuntimeError(f"Batch '{self.workload.name}' already ran")

        logger.info(
            f"Batch '{self.workload.name}': {self.total_requests} requests, "
            f"{self.config.pool_size} clients, failure threshold {self.breaker.threshold}"
        )
        self.pool = ClientPool(self.config.pool_size, self.client_factory, release_delay=self.workload.client_cooldown)
        futures: List[concurrent.futures.Future] = []

        start_time = time.perf_counter()
        with self.pool, concurrent.futures.ThreadPoolExecutor(
                max_workers=self.config.pool_size,
                thread_name_prefix=f"loadgen-{self.workload.name}") as executor:
            self._change_state(BatchState.DISPATCHING)
            for index in range(self.total_requests):
                if self.breaker.is_open:
                    break
                client = self.pool.acquire()
                # The breaker may have opened while waiting for a client
                if self.breaker.is_open:
                    self.pool.release(client)
                    break
                try:
                    descriptor = self.workload.next_request(index)
                    futures.append(executor.submit(self._run_request, client, descriptor))
                except BaseException:
                    self.pool.release(client)
                    raise

            self._change_state(BatchState.DRAINING)
            concurrent.futures.wait(futures)
        end_time = time.perf_counter()

        # Surface programming errors from tasks; request outcomes never raise here
        for future in futures:
            future.result()

        dispatched = len(futures)
        aborted = self.breaker.is_open
        report = ReportAnalyzer.compute_report(
            workload=self.workload.label,
            pool_size=self.config.pool_size,
            total_requests=dispatched if aborted else self.total_requests,
            start_time=start_time,
            end_time=end_time,
            failure_count=self.breaker.failure_count,
        )

        if aborted:
            self._change_state(BatchState.ABORTED)
            return BatchResult(
                workload=self.workload.name,
                state=BatchState.ABORTED,
                report=report,
                dispatched=dispatched,
                abort_cause=self.breaker.cause,
                reason=self.breaker.reason,
            )

        self._change_state(BatchState.COMPLETED)
        return BatchResult(
            workload=self.workload.name,
            state=BatchState.COMPLETED,
            report=report,
            dispatched=dispatched,
        )

    def _run_request(self, client: httpx.Client, descriptor: RequestDescriptor) -> None:
        """Execute one logical request and always hand the client back."""
        try:
            self.request_executor.execute(client, descriptor)
        except RequestError:
            self.breaker.record_failure()
        except UnexpectedStatusError as e:
            if self.config.unexpected_status_fatal:
                self.breaker.trip(str(e))
            else:
                logger.warning(f"Counting unexpected status {e.status_code} for {descriptor.url} as a failure")
                self.breaker.record_failure()
        finally:
            self.pool.release(client)
