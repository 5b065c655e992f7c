r"""httpretry - HTTP client with retries, backoff and lifecycle hooks.

This package wraps an injected request executor (by default an httpx
client) with a retry loop: failed attempts are retried with a
configurable backoff, user-supplied hooks observe every attempt, a
check-retry policy can replace the default "retry on server errors"
policy, and an error handler can replace the default result
composition.

Key Features:
    - Request, response and error hooks called on every attempt
    - Check-retry policies and a default retry policy (status >= 500)
    - Constant, linear, exponential and Retry-After aware backoff
    - Request bodies replayed unchanged on every attempt
    - All the errors of all the attempts reported in one MultiError
    - Sync and async clients, with cancellable backoff waits

Example:
    ```pycon
    >>> from httpretry import HttpClient
    >>> from httpretry.backoff import ExponentialBackoff
    >>> from httpretry.core import with_backoff, with_base_url, with_retry_count
    >>> with HttpClient(
    ...     with_base_url("https://api.example.com"),
    ...     with_retry_count(3),
    ...     with_backoff(ExponentialBackoff(base_delay=0.5)),
    ... ) as client:  # doctest: +SKIP
    ...     response = client.post("/items", content=b'{"key": "value"}')
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncHttpClient",
    "ClientConfig",
    "HttpClient",
    "HttpClientError",
    "MultiError",
    "RequestBuildError",
    "RetryCancelledError",
    "__version__",
    "build_config",
]

from importlib.metadata import PackageNotFoundError, version

from httpretry.client import HttpClient
from httpretry.client_async import AsyncHttpClient
from httpretry.core import ClientConfig, build_config
from httpretry.exceptions import (
    HttpClientError,
    MultiError,
    RequestBuildError,
    RetryCancelledError,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
