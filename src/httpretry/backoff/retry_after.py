r"""Backoff policy honouring the ``Retry-After`` response header."""

from __future__ import annotations

__all__ = ["RetryAfterBackoff"]

import logging
from typing import TYPE_CHECKING

from httpretry.backoff.base import BaseBackoff
from httpretry.backoff.constant import ConstantBackoff
from httpretry.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    import httpx

    from httpretry.policies import Backoff

logger: logging.Logger = logging.getLogger(__name__)


class RetryAfterBackoff(BaseBackoff):
    """Backoff policy that waits as long as the server asks.

    When the response of the attempt carries a parsable ``Retry-After``
    header (integer seconds or HTTP-date), its value is used. Otherwise,
    and after transport errors, the delay of ``fallback`` is used.

    Args:
        fallback: The backoff used when no ``Retry-After`` value is
            available. Defaults to ``ConstantBackoff()``.
        max_delay: Optional maximum delay cap in seconds. Useful to
            protect against servers asking for very long waits.

    Example:
        ```pycon
        >>> import httpx
        >>> from httpretry.backoff import LinearBackoff, RetryAfterBackoff
        >>> backoff = RetryAfterBackoff(fallback=LinearBackoff(base_delay=1.0))
        >>> backoff(0, httpx.Response(503, headers={"Retry-After": "7"}))
        7.0
        >>> backoff(1, httpx.Response(503))
        2.0
        >>> backoff(2, None)
        3.0

        ```
    """

    def __init__(self, fallback: Backoff | None = None, max_delay: float | None = None) -> None:
        super().__init__(max_delay=max_delay)
        self.fallback: Backoff = fallback if fallback is not None else ConstantBackoff()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(fallback={self.fallback!r}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int, response: httpx.Response | None = None) -> float:
        if response is not None:
            delay = parse_retry_after(response.headers.get("Retry-After"))
            if delay is not None:
                logger.debug(f"Using Retry-After header value: {delay:.2f}s")
                return delay
        return self.fallback(attempt, response)
