r"""Retry decision logic.

This module provides the RetryDecider class that decides whether another
attempt should be made, either through the configured check-retry policy
or through the default retry policy (retry on server errors).
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from httpretry.core.config import SERVER_ERROR_STATUS

if TYPE_CHECKING:
    import httpx

    from httpretry.policies import CheckRetry

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a request should be retried.

    Both decision methods return a ``(should_retry, override_error)``
    tuple. ``override_error`` is only meaningful when ``should_retry`` is
    ``False``: it is the error returned by the check-retry policy, to be
    added to the accumulated errors.

    Args:
        check_retry: Optional check-retry policy. When it is ``None`` the
            default retry policy applies.
        server_error_status: Lowest status code retried by the default
            retry policy.

    Example:
        ```pycon
        >>> import httpx
        >>> from httpretry.retry import RetryDecider
        >>> decider = RetryDecider(check_retry=None)
        >>> request = httpx.Request("GET", "https://example.com")
        >>> decider.should_retry_response(
        ...     request, httpx.Response(503), attempt=0, retry_count=2
        ... )
        (True, None)
        >>> decider.should_retry_response(
        ...     request, httpx.Response(503), attempt=2, retry_count=2
        ... )
        (False, None)

        ```
    """

    def __init__(
        self,
        check_retry: CheckRetry | None,
        server_error_status: int = SERVER_ERROR_STATUS,
    ) -> None:
        self.check_retry = check_retry
        self.server_error_status = server_error_status

    def should_retry_error(
        self,
        request: httpx.Request,
        error: Exception,
    ) -> tuple[bool, Exception | None]:
        """Determine if a transport error allows another attempt.

        The check-retry policy is consulted even on the last allowed
        attempt, so that it can contribute an error. Without a policy,
        transport errors are always retryable; the caller is responsible
        for not exceeding the number of attempts.

        Args:
            request: The request that failed.
            error: The transport error.

        Returns:
            Tuple of (should_retry, override_error).
        """
        if self.check_retry is None:
            return (True, None)
        should_retry, override = self.check_retry(request, None, error)
        if not should_retry:
            logger.debug(
                f"{request.method} request to {request.url}: check_retry rejected "
                f"retry after {type(error).__name__}"
            )
        return (bool(should_retry), override)

    def should_retry_response(
        self,
        request: httpx.Request,
        response: httpx.Response,
        attempt: int,
        retry_count: int,
    ) -> tuple[bool, Exception | None]:
        """Determine if a response should trigger another attempt.

        Args:
            request: The request that produced the response.
            response: The response of the attempt.
            attempt: Current attempt index (0-indexed).
            retry_count: Maximum number of retries.

        Returns:
            Tuple of (should_retry, override_error). Always
            ``(False, None)`` on the last allowed attempt.
        """
        if attempt >= retry_count:
            return (False, None)
        if self.check_retry is not None:
            should_retry, override = self.check_retry(request, response, None)
            if not should_retry:
                logger.debug(
                    f"{request.method} request to {request.url}: check_retry rejected "
                    f"retry after status {response.status_code}"
                )
            return (bool(should_retry), override)
        return (response.status_code >= self.server_error_status, None)
