r"""Synchronous retry executor for HTTP requests.

This module provides the RetryExecutor class that drives the attempts of
one request through an injected executor, invoking the hooks and
policies of the configuration and accumulating the errors.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING

import httpx

from httpretry.exceptions import RetryCancelledError
from httpretry.retry.decider import RetryDecider
from httpretry.retry.executor_core import close_response, compose_result
from httpretry.retry.manager import HookManager
from httpretry.utils.body import buffer_request_body
from httpretry.utils.sleep import wait

if TYPE_CHECKING:
    import threading

    from httpretry.core.config import ClientConfig
    from httpretry.policies import Executor

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes HTTP requests with retries, backoff and hooks.

    The executor orchestrates the following components:
    - RetryDecider: determines whether another attempt should be made
    - HookManager: invokes the request, response and error hooks
    - the backoff policy of the configuration: computes the waits

    The configuration is read-only, so one RetryExecutor can be shared
    by many threads.

    Args:
        config: The client configuration.
        executor: The executor performing the transport, for example an
            ``httpx.Client``.

    Example:
        ```pycon
        >>> import httpx
        >>> from httpretry.core import ClientConfig
        >>> from httpretry.retry import RetryExecutor
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     executor = RetryExecutor(ClientConfig(retry_count=2), client)
        ...     response = executor.execute(httpx.Request("GET", "https://example.com"))
        ...

        ```
    """

    def __init__(self, config: ClientConfig, executor: Executor) -> None:
        self.config = config
        self.executor = executor
        self.decider: RetryDecider = RetryDecider(config.check_retry)
        self.hooks: HookManager = HookManager(
            request_hook=config.request_hook,
            response_hook=config.response_hook,
            error_hook=config.error_hook,
        )

    def execute(
        self,
        request: httpx.Request,
        *,
        cancel_event: threading.Event | None = None,
    ) -> httpx.Response | None:
        """Execute a request with automatic retry logic.

        The body of the request is read into memory before the first
        attempt, and every attempt sends it from the start. At most
        ``retry_count + 1`` attempts are made. Transport errors
        (``httpx.RequestError``) and check-retry errors are accumulated;
        other exceptions raised by the executor or the hooks propagate.

        Args:
            request: The request to send. Its stream is replaced by a
                replayable one.
            cancel_event: Optional event aborting a backoff wait when it
                is set. The loop then stops and a ``RetryCancelledError``
                is accumulated.

        Returns:
            The last response, or the value returned by the error handler
            when one is configured.

        Raises:
            MultiError: If at least one error was accumulated and no
                error handler is configured.
        """
        body = buffer_request_body(request)
        retry_count = self.config.retry_count
        errors: list[Exception] = []
        response: httpx.Response | None = None
        attempt = 0

        try:
            for attempt in range(retry_count + 1):
                close_response(response)
                response = None
                self.hooks.on_request(request, attempt)
                body.rewind()

                try:
                    response = self.executor.send(request)
                except httpx.RequestError as exc:
                    errors.append(exc)
                    logger.debug(
                        f"{request.method} request to {request.url} encountered "
                        f"{type(exc).__name__} on attempt {attempt + 1}/{retry_count + 1}: {exc}"
                    )
                    self.hooks.on_error(request, exc, attempt)
                    should_retry, override = self.decider.should_retry_error(request, exc)
                    if not should_retry:
                        if override is not None:
                            errors.append(override)
                        break
                    if attempt < retry_count and self._backoff(
                        attempt, None, errors, cancel_event
                    ):
                        break
                    continue

                self.hooks.on_response(request, response)
                should_retry, override = self.decider.should_retry_response(
                    request, response, attempt, retry_count
                )
                if not should_retry:
                    if override is not None:
                        errors.append(override)
                    break
                logger.debug(
                    f"{request.method} request to {request.url} will be retried after status "
                    f"{response.status_code} (attempt {attempt + 1}/{retry_count + 1})"
                )
                if self._backoff(attempt, response, errors, cancel_event):
                    break
        except BaseException:
            # The pending response never reaches the caller on this path.
            close_response(response)
            raise

        return compose_result(response, errors, attempt, self.config.error_handler)

    def _backoff(
        self,
        attempt: int,
        response: httpx.Response | None,
        errors: list[Exception],
        cancel_event: threading.Event | None,
    ) -> bool:
        sleep_time = self.config.backoff(attempt, response)
        logger.debug(f"Waiting {sleep_time:.2f}s before retry")
        if wait(sleep_time, cancel_event):
            errors.append(RetryCancelledError(attempt))
            return True
        return False
