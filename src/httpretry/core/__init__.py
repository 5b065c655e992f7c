r"""Configuration of the HTTP clients: defaults, dataclass, options and
validation."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF",
    "DEFAULT_BACKOFF_DELAY",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_TIMEOUT",
    "SERVER_ERROR_STATUS",
    "ClientConfig",
    "Option",
    "build_config",
    "validate_retry_count",
    "validate_timeout",
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

from httpretry.core.config import (
    DEFAULT_BACKOFF,
    DEFAULT_BACKOFF_DELAY,
    DEFAULT_RETRY_COUNT,
    DEFAULT_TIMEOUT,
    SERVER_ERROR_STATUS,
    ClientConfig,
)
from httpretry.core.options import (
    Option,
    build_config,
    with_backoff,
    with_base_url,
    with_check_retry,
    with_error_handler,
    with_error_hook,
    with_executor,
    with_request_hook,
    with_response_hook,
    with_retry_count,
    with_timeout,
)
from httpretry.core.validation import validate_retry_count, validate_timeout
