"""Bounded pool of reusable HTTP clients."""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Set, Tuple

import httpx

from .exceptions import ClientPoolError


# Configure logging
logger = logging.getLogger(__name__)


class ClientPool:
    """Lends a fixed set of clients to concurrent callers.

    The pool is fully populated on construction. acquire() blocks while every
    client is borrowed; release() hands the client back and wakes one waiter.
    At any instant borrowed + available == size.
    """

    def __init__(self, size: int, client_factory: Callable[[], httpx.Client], release_delay: float = 0.0):
        """Initialize the pool.

        Args:
            size: Number of clients, must be positive.
            client_factory: Callable creating one client.
            release_delay: Seconds a client cools down before it becomes available again.
        """
        if size <= 0:
            raise ClientPoolError(f"Pool size must be positive, got {size}")

        self.size = size
        self.release_delay = release_delay
        self._condition = threading.Condition()
        self._available: List[httpx.Client] = [client_factory() for _ in range(size)]
        self._members: Set[int] = {id(client) for client in self._available}
        self._borrowed: Set[int] = set()
        self._closed = False

        logger.debug(f"Client pool initialized with {size} clients")

    def acquire(self) -> httpx.Client:
        """Block until a client is available and take ownership of it."""
        with self._condition:
            while not self._available:
                if self._closed:
                    raise ClientPoolError("Client pool is closed")
                self._condition.wait()
            if self._closed:
                raise ClientPoolError("Client pool is closed")
            client = self._available.pop()
            self._borrowed.add(id(client))
            return client

    def release(self, client: httpx.Client) -> None:
        """Return a borrowed client to the pool.

        Raises:
            ClientPoolError: If the client is not currently borrowed from this pool.
        """
        if id(client) not in self._members:
            raise ClientPoolError("Client does not belong to this pool")

        if self.release_delay > 0:
            time.sleep(self.release_delay)

        with self._condition:
            if id(client) not in self._borrowed:
                raise ClientPoolError("Client was released more than once")
            self._borrowed.remove(id(client))
            self._available.append(client)
            self._condition.notify()

    @contextmanager
    def lease(self) -> Iterator[httpx.Client]:
        """Borrow a client for the duration of a with block."""
        client = self.acquire()
        try:
            yield client
        finally:
            self.release(client)

    def snapshot(self) -> Tuple[int, int]:
        """Return (borrowed, available) counts read together."""
        with self._condition:
            return len(self._borrowed), len(self._available)

    def close(self) -> None:
        """Close every available client and wake blocked acquirers."""
        with self._condition:
            self._closed = True
            clients = list(self._available)
            borrowed = len(self._borrowed)
            self._condition.notify_all()

        if borrowed:
            logger.warning(f"Closing client pool with {borrowed} clients still borrowed")
        for client in clients:
            client.close()

    def __enter__(self) -> "ClientPool":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
