"""HTTP utilities for the tile load generator."""

from http.cookiejar import CookieJar, DefaultCookiePolicy

import httpx

from src.const import DEFAULT_REQUEST_TIMEOUT, DEFAULT_MAX_KEEPALIVE_CONNECTIONS


class HTTPXUtil:

    @staticmethod
    def create_timeout(timeout: float = DEFAULT_REQUEST_TIMEOUT) -> httpx.Timeout:
        """Build a timeout applying the same limit to every phase of a call."""
        return httpx.Timeout(
            connect=timeout,
            read=timeout,
            write=timeout,
            pool=timeout
        )

    @staticmethod
    def create_cookie_jar() -> CookieJar:
        """Build a cookie jar that refuses every cookie."""
        return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))

    @staticmethod
    def create_client(timeout: float = DEFAULT_REQUEST_TIMEOUT,
                      max_keepalive_connections: int = DEFAULT_MAX_KEEPALIVE_CONNECTIONS,
                      transport: httpx.BaseTransport = None) -> httpx.Client:
        """Create a reusable client for the load generator's client pool.

        The client follows redirects and never stores cookies, so nothing a
        response sets carries over to the next borrower.

        Args:
            timeout: Per-call timeout in seconds.
            max_keepalive_connections: Idle connections kept open per client.
            transport: Optional transport override, used to simulate a server in tests.

        Returns:
            Configured httpx client. Callers own it and must close it.
        """
        limits = httpx.Limits(max_keepalive_connections=max_keepalive_connections)
        return httpx.Client(
            timeout=HTTPXUtil.create_timeout(timeout),
            limits=limits,
            transport=transport,
            cookies=HTTPXUtil.create_cookie_jar(),
            follow_redirects=True,
        )
