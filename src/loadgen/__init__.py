"""Load generator package initialization."""
from .models import RequestDescriptor, RunReport, BatchState, AbortCause, BatchResult
from .constants import WorkloadConstants
from .exceptions import LoadGeneratorError, RequestError, UnexpectedStatusError, ClientPoolError, BatchAbortedError
from .client_pool import ClientPool
from .retry import RetryConfig, FixedDelayRetrier
from .failure_breaker import BreakerState, FailureBreaker
from .request_executor import RequestExecutor
from .workloads import WorkloadProducer, RandomGeoTileProducer, FixedImageTileProducer, build_workloads
from .report_analyzer import ReportAnalyzer
from .batch_coordinator import BatchCoordinator
from .result_exporter import ResultExporter
from .runner import LoadRunner

__all__ = [
    'RequestDescriptor',
    'RunReport',
    'BatchState',
    'AbortCause',
    'BatchResult',
    'WorkloadConstants',
    'LoadGeneratorError',
    'RequestError',
    'UnexpectedStatusError',
    'ClientPoolError',
    'BatchAbortedError',
    'ClientPool',
    'RetryConfig',
    'FixedDelayRetrier',
    'BreakerState',
    'FailureBreaker',
    'RequestExecutor',
    'WorkloadProducer',
    'RandomGeoTileProducer',
    'FixedImageTileProducer',
    'build_workloads',
    'ReportAnalyzer',
    'BatchCoordinator',
    'ResultExporter',
    'LoadRunner'
]
