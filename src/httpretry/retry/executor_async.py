r"""Asynchronous retry executor for HTTP requests.

This module provides the AsyncRetryExecutor class, the ``asyncio``
counterpart of ``RetryExecutor``. Backoff waits use
``asyncio.sleep()``, so cancelling the task running the request also
aborts an in-progress wait.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx

from httpretry.retry.decider import RetryDecider
from httpretry.retry.executor_core import aclose_response, compose_result
from httpretry.retry.manager import HookManager
from httpretry.utils.body import abuffer_request_body

if TYPE_CHECKING:
    from httpretry.core.config import ClientConfig
    from httpretry.policies import AsyncExecutor

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async HTTP requests with retries, backoff and hooks.

    Hooks and policies are plain (synchronous) callables, invoked from
    the event loop; they should be fast operations.

    Args:
        config: The client configuration.
        executor: The executor performing the transport, for example an
            ``httpx.AsyncClient``.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from httpretry.core import ClientConfig
        >>> from httpretry.retry import AsyncRetryExecutor
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         executor = AsyncRetryExecutor(ClientConfig(retry_count=2), client)
        ...         return await executor.execute(httpx.Request("GET", "https://example.com"))
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, config: ClientConfig, executor: AsyncExecutor) -> None:
        self.config = config
        self.executor = executor
        self.decider: RetryDecider = RetryDecider(config.check_retry)
        self.hooks: HookManager = HookManager(
            request_hook=config.request_hook,
            response_hook=config.response_hook,
            error_hook=config.error_hook,
        )

    async def execute(self, request: httpx.Request) -> httpx.Response | None:
        """Execute an async request with automatic retry logic.

        Same contract as ``RetryExecutor.execute``. If the task is
        cancelled during a backoff wait, the pending response is closed
        and ``asyncio.CancelledError`` propagates.

        Args:
            request: The request to send. Its stream is replaced by a
                replayable one.

        Returns:
            The last response, or the value returned by the error handler
            when one is configured.

        Raises:
            MultiError: If at least one error was accumulated and no
                error handler is configured.
        """
        body = await abuffer_request_body(request)
        retry_count = self.config.retry_count
        errors: list[Exception] = []
        response: httpx.Response | None = None
        attempt = 0

        try:
            for attempt in range(retry_count + 1):
                await aclose_response(response)
                response = None
                self.hooks.on_request(request, attempt)
                body.rewind()

                try:
                    response = await self.executor.send(request)
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
                    if attempt < retry_count:
                        await self._backoff(attempt, None)
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
                await self._backoff(attempt, response)
        except BaseException:
            # Covers task cancellation during a backoff wait.
            await aclose_response(response)
            raise

        return compose_result(response, errors, attempt, self.config.error_handler)

    async def _backoff(self, attempt: int, response: httpx.Response | None) -> None:
        sleep_time = self.config.backoff(attempt, response)
        logger.debug(f"Waiting {sleep_time:.2f}s before retry")
        await asyncio.sleep(sleep_time)
