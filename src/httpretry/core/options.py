r"""Option functions building a ``ClientConfig``.

Each option is a function taking a configuration and returning a copy
with exactly one field replaced. ``build_config`` applies options in
order to the default configuration, so later options override earlier
ones for the same field. An option created with ``None`` returns the
configuration unchanged.

Example:
    ```pycon
    >>> from httpretry.backoff import ExponentialBackoff
    >>> from httpretry.core.options import build_config, with_backoff, with_retry_count
    >>> config = build_config(with_retry_count(3), with_backoff(ExponentialBackoff()))
    >>> config.retry_count
    3
    >>> build_config(with_retry_count(3), with_retry_count(1)).retry_count
    1

    ```
"""

from __future__ import annotations

__all__ = [
    "Option",
    "build_config",
    "with_backoff",
    "with_base_url",
    "with_check_retry",
    "with_error_handler",
    "with_error_hook",
    "with_executor",
    "with_request_hook",
    "with_response_hook",
    "with_retry_count",
    "with_timeout",
]

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from httpretry.core.config import ClientConfig

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

Option = Callable[[ClientConfig], ClientConfig]


def build_config(*options: Option, base: ClientConfig | None = None) -> ClientConfig:
    """Apply options in order to a configuration.

    Args:
        *options: The options to apply.
        base: The starting configuration. Defaults to ``ClientConfig()``.

    Returns:
        The resulting configuration.
    """
    config = base if base is not None else ClientConfig()
    for option in options:
        config = option(config)
    return config


def _set(field: str, value: Any) -> Option:
    def option(config: ClientConfig) -> ClientConfig:
        return config.merge(**{field: value})

    return option


def with_executor(executor: Executor | AsyncExecutor | None) -> Option:
    """Use ``executor`` to perform the transport."""
    return _set("executor", executor)


def with_timeout(timeout: float | None) -> Option:
    """Set the timeout, in seconds, of the default executor."""
    return _set("timeout", timeout)


def with_retry_count(retry_count: int | None) -> Option:
    """Set the maximum number of retries after the initial attempt."""
    return _set("retry_count", retry_count)


def with_request_hook(hook: RequestHook | None) -> Option:
    return _set("request_hook", hook)


def with_response_hook(hook: ResponseHook | None) -> Option:
    return _set("response_hook", hook)


def with_error_hook(hook: ErrorHook | None) -> Option:
    return _set("error_hook", hook)


def with_check_retry(check_retry: CheckRetry | None) -> Option:
    """Replace the default retry policy (status >= 500) by ``check_retry``."""
    return _set("check_retry", check_retry)


def with_backoff(backoff: Backoff | None) -> Option:
    return _set("backoff", backoff)


def with_error_handler(handler: ErrorHandler | None) -> Option:
    """Replace the default result composition by ``handler``."""
    return _set("error_handler", handler)


def with_base_url(base_url: str | None) -> Option:
    """Prefix every URL given to the verb methods with ``base_url``."""
    return _set("base_url", base_url or None)
