r"""Synchronous HTTP client with retries, backoff and lifecycle hooks.

This module provides the HttpClient class: a façade exposing one method
per HTTP verb, building requests from the configuration (base URL) and
delegating them to a ``RetryExecutor``.
"""

from __future__ import annotations

__all__ = ["HttpClient", "build_request"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from httpretry.core.config import ClientConfig
from httpretry.core.options import build_config
from httpretry.exceptions import RequestBuildError
from httpretry.retry import RetryExecutor

if TYPE_CHECKING:
    import threading
    from types import TracebackType
    from typing import Self

    from httpretry.core.options import Option
    from httpretry.policies import Executor

logger: logging.Logger = logging.getLogger(__name__)


def build_request(
    method: str,
    url: str,
    *,
    base_url: str = "",
    content: Any = None,
    headers: Any = None,
    **kwargs: Any,
) -> httpx.Request:
    """Build a request, prefixing its URL with the base URL.

    The base URL is prepended by plain string concatenation; no path
    normalization is applied.

    Args:
        method: The HTTP method.
        url: The URL, or the path appended to ``base_url``.
        base_url: Optional prefix of ``url``.
        content: Optional request body (bytes, str, or an iterable of
            bytes).
        headers: Optional request headers.
        **kwargs: Additional keyword arguments passed to
            ``httpx.Request`` (``params``, ``json``, ``data``, ...).

    Returns:
        The request.

    Raises:
        RequestBuildError: If the request cannot be built, for example
            because the URL is malformed.

    Example:
        ```pycon
        >>> from httpretry.client import build_request
        >>> request = build_request("GET", "/users", base_url="https://api.example.com")
        >>> request.url
        URL('https://api.example.com/users')

        ```
    """
    if base_url:
        url = base_url + url
    try:
        return httpx.Request(method, url, content=content, headers=headers, **kwargs)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as exc:
        logger.debug(f"{method} request to {url!r} could not be built: {exc}")
        raise RequestBuildError(method=method, url=url) from exc


class HttpClient:
    r"""Synchronous HTTP client with automatic retry logic.

    The client is configured either with a ``ClientConfig`` or with
    option functions (see ``httpretry.core.options``); both cannot be
    given at once.

    When the configuration does not inject an executor, the client builds
    an ``httpx.Client`` with the configured timeout and closes it on
    ``close()`` or when leaving the ``with`` block. An injected executor
    is never closed by the client.

    Args:
        *options: Option functions applied to the default configuration.
        config: Optional ready-made configuration.

    Example:
        ```pycon
        >>> from httpretry import HttpClient
        >>> from httpretry.core import with_base_url, with_retry_count
        >>> with HttpClient(
        ...     with_base_url("https://api.example.com"), with_retry_count(3)
        ... ) as client:  # doctest: +SKIP
        ...     response = client.get("/data")
        ...

        ```
    """

    def __init__(self, *options: Option, config: ClientConfig | None = None) -> None:
        if options and config is not None:
            msg = "options and config cannot be given at the same time"
            raise ValueError(msg)
        self._config: ClientConfig = config if config is not None else build_config(*options)
        executor = self._config.executor
        self._owns_executor = executor is None
        if executor is None:
            executor = httpx.Client(timeout=self._config.timeout)
        self._executor: Executor = executor
        self._retry_executor = RetryExecutor(self._config, self._executor)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Close the executor if it was built by the client."""
        if self._owns_executor:
            self._executor.close()

    def send(
        self,
        request: httpx.Request,
        *,
        cancel_event: threading.Event | None = None,
    ) -> httpx.Response | None:
        r"""Send a ready-made request with automatic retry logic.

        The base URL is not applied to ``request``.

        Args:
            request: The request to send.
            cancel_event: Optional event aborting a backoff wait.

        Returns:
            The final response.

        Raises:
            MultiError: If errors were accumulated and no error handler is
                configured.
        """
        return self._retry_executor.execute(request, cancel_event=cancel_event)

    def request(
        self,
        method: str,
        url: str,
        *,
        content: Any = None,
        headers: Any = None,
        cancel_event: threading.Event | None = None,
        **kwargs: Any,
    ) -> httpx.Response | None:
        r"""Build and send a request with automatic retry logic.

        Args:
            method: The HTTP method.
            url: The URL, appended to the configured base URL if any.
            content: Optional request body.
            headers: Optional request headers.
            cancel_event: Optional event aborting a backoff wait.
            **kwargs: Additional keyword arguments passed to
                ``httpx.Request``.

        Returns:
            The final response.

        Raises:
            RequestBuildError: If the request cannot be built. No attempt
                is made.
            MultiError: If errors were accumulated and no error handler is
                configured.
        """
        request = build_request(
            method,
            url,
            base_url=self._config.base_url,
            content=content,
            headers=headers,
            **kwargs,
        )
        return self.send(request, cancel_event=cancel_event)

    def get(self, url: str, *, headers: Any = None, **kwargs: Any) -> httpx.Response | None:
        """Send a GET request. See ``request()``."""
        return self.request("GET", url, headers=headers, **kwargs)

    def post(
        self, url: str, content: Any = None, *, headers: Any = None, **kwargs: Any
    ) -> httpx.Response | None:
        """Send a POST request. See ``request()``."""
        return self.request("POST", url, content=content, headers=headers, **kwargs)

    def put(
        self, url: str, content: Any = None, *, headers: Any = None, **kwargs: Any
    ) -> httpx.Response | None:
        """Send a PUT request. See ``request()``."""
        return self.request("PUT", url, content=content, headers=headers, **kwargs)

    def delete(self, url: str, *, headers: Any = None, **kwargs: Any) -> httpx.Response | None:
        """Send a DELETE request. See ``request()``."""
        return self.request("DELETE", url, headers=headers, **kwargs)
