r"""Asynchronous HTTP client with retries, backoff and lifecycle hooks.

This module provides the AsyncHttpClient class, the ``asyncio``
counterpart of ``HttpClient``.
"""

from __future__ import annotations

__all__ = ["AsyncHttpClient"]

from typing import TYPE_CHECKING, Any

import httpx

from httpretry.client import build_request
from httpretry.core.config import ClientConfig
from httpretry.core.options import build_config
from httpretry.retry import AsyncRetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from httpretry.core.options import Option
    from httpretry.policies import AsyncExecutor


class AsyncHttpClient:
    r"""Asynchronous HTTP client with automatic retry logic.

    When the configuration does not inject an executor, the client builds
    an ``httpx.AsyncClient`` with the configured timeout and closes it on
    ``aclose()`` or when leaving the ``async with`` block. Cancelling the
    task awaiting a request aborts any backoff wait in progress.

    Args:
        *options: Option functions applied to the default configuration.
        config: Optional ready-made configuration.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpretry import AsyncHttpClient
        >>> from httpretry.core import with_retry_count
        >>> async def main():
        ...     async with AsyncHttpClient(with_retry_count(3)) as client:
        ...         return await client.get("https://api.example.com/data")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

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
            executor = httpx.AsyncClient(timeout=self._config.timeout)
        self._executor: AsyncExecutor = executor
        self._retry_executor = AsyncRetryExecutor(self._config, self._executor)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the executor if it was built by the client."""
        if self._owns_executor:
            await self._executor.aclose()

    async def send(self, request: httpx.Request) -> httpx.Response | None:
        """Send a ready-made request with automatic retry logic.

        The base URL is not applied to ``request``.
        """
        return await self._retry_executor.execute(request)

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: Any = None,
        headers: Any = None,
        **kwargs: Any,
    ) -> httpx.Response | None:
        """Build and send a request. See ``HttpClient.request()``."""
        request = build_request(
            method,
            url,
            base_url=self._config.base_url,
            content=content,
            headers=headers,
            **kwargs,
        )
        return await self.send(request)

    async def get(self, url: str, *, headers: Any = None, **kwargs: Any) -> httpx.Response | None:
        """Send a GET request. See ``HttpClient.request()``."""
        return await self.request("GET", url, headers=headers, **kwargs)

    async def post(
        self, url: str, content: Any = None, *, headers: Any = None, **kwargs: Any
    ) -> httpx.Response | None:
        """Send a POST request. See ``HttpClient.request()``."""
        return await self.request("POST", url, content=content, headers=headers, **kwargs)

    async def put(
        self, url: str, content: Any = None, *, headers: Any = None, **kwargs: Any
    ) -> httpx.Response | None:
        """Send a PUT request. See ``HttpClient.request()``."""
        return await self.request("PUT", url, content=content, headers=headers, **kwargs)

    async def delete(
        self, url: str, *, headers: Any = None, **kwargs: Any
    ) -> httpx.Response | None:
        """Send a DELETE request. See ``HttpClient.request()``."""
        return await self.request("DELETE", url, headers=headers, **kwargs)
