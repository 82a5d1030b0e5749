"""Load runner to orchestrate the workloads of a run."""
import logging
import sys
import threading
import concurrent.futures
from typing import Callable, List, Optional, TextIO

import httpx

from src.shared.config import Config
from .batch_coordinator import BatchCoordinator
from .models import BatchResult
from .result_exporter import ResultExporter
from .workloads import WorkloadProducer, build_workloads


# Configure logging
logger = logging.getLogger(__name__)


class LoadRunner:
    """Runs every configured workload concurrently and reports each batch."""

    def __init__(self, config: Config, client_factory: Optional[Callable[[], httpx.Client]] = None,
                 stream: TextIO = None):
        self.config = config
        self.client_factory = client_factory
        self.stream = stream or sys.stdout
        self._output_lock = threading.Lock()

    def run(self) -> List[BatchResult]:
        """Run all workloads and return their results in configured order."""
        workloads = build_workloads(self.config)
        logger.info(f"Starting load run against {self.config.base_url} with workloads: {', '.join(self.config.workloads)}")

        with concurrent.futures.ThreadPoolExecutor(max_workers=len(workloads), thread_name_prefix="loadgen-batch") as executor:
            futures = [executor.submit(self._run_workload, workload) for workload in workloads]
            results = [future.result() for future in futures]

        if self.config.results_csv is not None:
            ResultExporter.save_reports([result.report for result in results if result.completed], self.config.results_csv)

        return results

    def _run_workload(self, workload: WorkloadProducer) -> BatchResult:
        coordinator = BatchCoordinator(self.config, workload, client_factory=self.client_factory)
        result = coordinator.run()

        if result.completed:
            with self._output_lock:
                self.stream.write(ResultExporter.format_header(workload.label) + "\n")
                self.stream.write(ResultExporter.format_line(result.report) + "\n")
                self.stream.flush()
        else:
            logger.error(
                f"Workload '{workload.name}' aborted after {result.dispatched} of "
                f"{coordinator.total_requests} requests: {result.reason}"
            )
        return result
