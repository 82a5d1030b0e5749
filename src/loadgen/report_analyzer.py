"""Computes run reports from batch timings."""
from .models import RunReport


class ReportAnalyzer:
    """Computes the aggregate report of a batch."""

    @staticmethod
    def compute_report(workload: str, pool_size: int, total_requests: int,
                       start_time: float, end_time: float, failure_count: int) -> RunReport:
        """
        Compute total and mean duration of a batch.

        Args:
            workload: Workload label.
            pool_size: Number of pooled clients.
            total_requests: Logical requests issued by the batch.
            start_time: perf_counter value when dispatch started.
            end_time: perf_counter value after every request finished.
            failure_count: Failed logical requests.

        Returns:
            RunReport dataclass. Mean duration is 0.0 when no request was issued.
        """
        total_duration = end_time - start_time
        mean_duration = total_duration / total_requests if total_requests else 0.0

        return RunReport(
            workload=workload,
            pool_size=pool_size,
            total_requests=total_requests,
            total_duration=total_duration,
            mean_duration=mean_duration,
            failure_count=failure_count,
        )
