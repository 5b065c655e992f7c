r"""Callable contracts for the policies and hooks of the HTTP client.

This module defines the shape of every user-supplied policy accepted by
the client configuration, and the executor protocols used to perform the
actual transport. None of them carries state or logic; they only
document the signatures expected by the retry executors.

The policies are:
- RequestHook: called before every attempt with the request and the
  attempt index (0 for the initial request)
- ResponseHook: called after every attempt that produced a response
- ErrorHook: called after every attempt that failed with a transport error
- CheckRetry: decides whether another attempt should be made
- Backoff: computes the wait (in seconds) before the next attempt
- ErrorHandler: replaces the default result composition

Example:
    ```pycon
    >>> import httpx
    >>> from httpretry.policies import CheckRetry
    >>> def retry_on_429(
    ...     request: httpx.Request,
    ...     response: httpx.Response | None,
    ...     error: Exception | None,
    ... ) -> tuple[bool, Exception | None]:
    ...     if response is not None and response.status_code == 429:
    ...         return True, None
    ...     return False, None
    ...
    >>> check_retry: CheckRetry = retry_on_429

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncExecutor",
    "Backoff",
    "CheckRetry",
    "ErrorHandler",
    "ErrorHook",
    "Executor",
    "RequestHook",
    "ResponseHook",
]

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Executor(Protocol):
    """Perform one request/response exchange.

    ``httpx.Client`` satisfies this protocol. The executor must raise an
    ``httpx.RequestError`` (or a subclass) when it fails to produce a
    response.
    """

    def send(self, request: httpx.Request) -> httpx.Response: ...


@runtime_checkable
class AsyncExecutor(Protocol):
    """Asynchronous counterpart of ``Executor``.

    ``httpx.AsyncClient`` satisfies this protocol.
    """

    async def send(self, request: httpx.Request) -> httpx.Response: ...


RequestHook = Callable[[httpx.Request, int], None]
"""``(request, attempt) -> None``, called before every attempt."""

ResponseHook = Callable[[httpx.Request, httpx.Response], None]
"""``(request, response) -> None``, called after every response.

Reading or closing the response body from this hook affects the
response returned to the caller.
"""

ErrorHook = Callable[[httpx.Request, Exception, int], None]
"""``(request, error, attempt) -> None``, called after every transport
error."""

CheckRetry = Callable[
    [httpx.Request, httpx.Response | None, Exception | None],
    tuple[bool, Exception | None],
]
"""``(request, response, error) -> (should_retry, override_error)``.

Exactly one of ``response`` and ``error`` is not ``None``. When
``should_retry`` is ``False`` the loop stops and ``override_error``, if
any, is added to the accumulated errors. The callback is responsible for
the body of a response it rejects.
"""

Backoff = Callable[[int, httpx.Response | None], float]
"""``(attempt, response) -> seconds`` to wait before the next attempt."""

ErrorHandler = Callable[
    [httpx.Response | None, Exception | None, int],
    httpx.Response | None,
]
"""``(last_response, error, num_retries) -> response``.

``error`` is the aggregate of the accumulated errors, or ``None`` when
no error was recorded. ``num_retries`` is the number of attempts made
beyond the first one. The returned value is the final result of the
request; the handler owns the response body from then on.
"""
