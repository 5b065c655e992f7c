r"""Parameter validation utilities for the client configuration."""

from __future__ import annotations

__all__ = ["validate_retry_count", "validate_timeout"]


def validate_timeout(timeout: float) -> None:
    """Validate the timeout of the default executor.

    Args:
        timeout: Maximum seconds to wait for server responses. Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from httpretry.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_count(retry_count: int) -> None:
    """Validate the number of retries.

    Args:
        retry_count: Maximum number of retries after the initial attempt.
            Must be >= 0. A value of 0 means no retries.

    Raises:
        TypeError: If retry_count is not an integer.
        ValueError: If retry_count is negative.

    Example:
        ```pycon
        >>> from httpretry.core.validation import validate_retry_count
        >>> validate_retry_count(3)
        >>> validate_retry_count(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: retry_count must be >= 0, got -1

        ```
    """
    if isinstance(retry_count, bool) or not isinstance(retry_count, int):
        msg = f"retry_count must be an integer, got {type(retry_count).__name__}"
        raise TypeError(msg)
    if retry_count < 0:
        msg = f"retry_count must be >= 0, got {retry_count}"
        raise ValueError(msg)
