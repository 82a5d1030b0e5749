"""Unit tests for the failure-threshold breaker."""

import threading

import pytest

from src.loadgen.failure_breaker import FailureBreaker, BreakerState
from src.loadgen.models import AbortCause


def test_breaker_initial_state():
    """Test that the breaker starts CLOSED with no failures."""
    breaker = FailureBreaker(threshold=3, name="test")

    assert breaker.state == BreakerState.CLOSED
    assert not breaker.is_open
    assert breaker.failure_count == 0
    assert breaker.cause is None
    assert breaker.reason is None


def test_failures_up_to_threshold_keep_breaker_closed():
    """Test that reaching the threshold is tolerated."""
    breaker = FailureBreaker(threshold=3)
    for expected in range(1, 4):
        assert breaker.record_failure() == expected
    assert breaker.state == BreakerState.CLOSED


def test_exceeding_threshold_opens_breaker():
    """Test that the first failure past the threshold opens the breaker."""
    breaker = FailureBreaker(threshold=2)
    for _ in range(3):
        breaker.record_failure()

    assert breaker.is_open
    assert breaker.cause == AbortCause.THRESHOLD_BREACHED
    assert breaker.reason == "Failed over 2 requests, aborting"


def test_zero_threshold_opens_on_first_failure():
    """Test that a zero threshold tolerates no failure."""
    breaker = FailureBreaker(threshold=0)
    breaker.record_failure()
    assert breaker.is_open


def test_trip_opens_immediately():
    """Test that a fatal report opens the breaker regardless of the count."""
    breaker = FailureBreaker(threshold=100)
    breaker.trip("Fatal code: 503. Body: down")

    assert breaker.is_open
    assert breaker.cause == AbortCause.UNEXPECTED_STATUS
    assert breaker.failure_count == 0
    assert breaker.metrics.fatal_reports == 1


def test_first_cause_wins():
    """Test that later causes do not overwrite the first one."""
    breaker = FailureBreaker(threshold=0)
    breaker.record_failure()
    breaker.trip("Fatal code: 500. Body: ")

    assert breaker.cause == AbortCause.THRESHOLD_BREACHED
    assert breaker.get_status()["metrics"] == {"failed_requests": 1, "fatal_reports": 1}


def test_concurrent_failures_are_all_counted():
    """Test that concurrent increments are not lost."""
    breaker = FailureBreaker(threshold=10_000)

    def worker():
        for _ in range(500):
            breaker.record_failure()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert breaker.failure_count == 4000
    assert breaker.state == BreakerState.CLOSED


def test_negative_threshold_rejected():
    """Test that a negative threshold is invalid."""
    with pytest.raises(ValueError):
        FailureBreaker(threshold=-1)


def test_get_status():
    """Test the status dictionary."""
    breaker = FailureBreaker(threshold=1, name="geo")
    breaker.record_failure()
    status = breaker.get_status()

    assert status["name"] == "geo"
    assert status["state"] == "closed"
    assert status["threshold"] == 1
    assert status["cause"] is None
