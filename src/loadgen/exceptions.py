"""Custom exceptions for the load generator."""
from typing import Optional


class LoadGeneratorError(Exception):
    """Base exception for load generator failures."""
    pass


class RequestError(LoadGeneratorError):
    """Exception raised when every attempt of a request failed at the transport level."""
    pass


class UnexpectedStatusError(LoadGeneratorError):
    """Exception raised when the server answered with a status the run does not accept."""

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        super().__init__(f"Fatal code: {status_code}. Body: {body}")
        self.status_code = status_code
        self.body = body
        self.url = url


class ClientPoolError(LoadGeneratorError):
    """Exception raised when the client pool is misused."""
    pass


class BatchAbortedError(LoadGeneratorError):
    """Exception raised when a caller asks an aborted batch for its result."""

    def __init__(self, result):
        super().__init__(f"Batch '{result.workload}' aborted: {result.reason}")
        self.result = result
