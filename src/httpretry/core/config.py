r"""Configuration dataclass and defaults for the HTTP clients.

This module provides the configuration constants and the immutable
configuration object shared by ``HttpClient``, ``AsyncHttpClient`` and
the retry executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF",
    "DEFAULT_BACKOFF_DELAY",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_TIMEOUT",
    "SERVER_ERROR_STATUS",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from httpretry.backoff import ConstantBackoff
from httpretry.core.validation import validate_retry_count, validate_timeout

if TYPE_CHECKING:
    from httpretry.policies import (
        AsyncExecutor,
        Backoff,
        CheckRetry,
        ErrorHandler,
        ErrorHook,
        Executor,
        RequestHook,
        ResponseHook,
    )


# Timeout in seconds of the executor built when none is injected
DEFAULT_TIMEOUT = 60.0

# Total attempts = retry_count + 1 (initial attempt)
DEFAULT_RETRY_COUNT = 0

DEFAULT_BACKOFF_DELAY = 0.5

# Wait used between attempts when no backoff policy is configured
DEFAULT_BACKOFF: Backoff = ConstantBackoff(delay=DEFAULT_BACKOFF_DELAY)

# Responses with a status code >= this value are retried when no
# check-retry policy is configured
SERVER_ERROR_STATUS = 500


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration of an HTTP client.

    Args:
        base_url: Prefix prepended (by plain string concatenation) to the
            URL given to the verb methods. Empty means no prefix.
        retry_count: Maximum number of retries after the initial attempt.
            Must be >= 0.
        timeout: Timeout in seconds of the default executor. Ignored when
            an executor is injected. Must be > 0.
        request_hook: Optional hook called before every attempt.
        response_hook: Optional hook called after every response.
        error_hook: Optional hook called after every transport error.
        check_retry: Optional policy deciding whether to retry. When it is
            not set, responses with a status code >= 500 are retried.
        backoff: Policy computing the wait before the next attempt.
        error_handler: Optional callable replacing the default result
            composition.
        executor: Optional executor performing the transport. When it is
            ``None`` the client builds an ``httpx.Client`` (or
            ``httpx.AsyncClient``) with ``timeout``.

    Example:
        ```pycon
        >>> from httpretry.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.retry_count
        0
        >>> config = ClientConfig(retry_count=3, base_url="https://api.example.com")
        >>> merged = config.merge(retry_count=5)
        >>> merged.retry_count
        5
        >>> config.retry_count  # Original unchanged
        3

        ```
    """

    base_url: str = ""
    retry_count: int = DEFAULT_RETRY_COUNT
    timeout: float = DEFAULT_TIMEOUT
    request_hook: RequestHook | None = None
    response_hook: ResponseHook | None = None
    error_hook: ErrorHook | None = None
    check_retry: CheckRetry | None = None
    backoff: Backoff = DEFAULT_BACKOFF
    error_handler: ErrorHandler | None = None
    executor: Executor | AsyncExecutor | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_count(self.retry_count)
        validate_timeout(self.timeout)
        if self.backoff is None:
            msg = "backoff must not be None"
            raise ValueError(msg)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with the specified fields overridden.

        Only non-None override values are applied, so ``None`` never
        clears a field.

        Args:
            **overrides: Keyword arguments for the fields to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from httpretry.core.config import ClientConfig
            >>> config = ClientConfig(retry_count=3)
            >>> config.merge(retry_count=None, base_url="http://localhost").retry_count
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
