r"""Abstract base class for backoff policies."""

from __future__ import annotations

__all__ = ["BaseBackoff"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class BaseBackoff(ABC):
    """Abstract base class for backoff policies.

    A backoff policy computes how long to wait before the next attempt
    from the index of the attempt that just finished and, when there is
    one, the response it produced. Instances are callables, so they can
    be used wherever a ``Backoff`` function is expected.

    Args:
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.
    """

    def __init__(self, max_delay: float | None = None) -> None:
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)
        self.max_delay = max_delay

    def __call__(self, attempt: int, response: httpx.Response | None = None) -> float:
        delay = self.calculate(attempt, response)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    @abstractmethod
    def calculate(self, attempt: int, response: httpx.Response | None = None) -> float:
        """Calculate the uncapped delay before the next attempt.

        Args:
            attempt: The index of the attempt that just finished
                (0-indexed). For example, attempt=0 means the initial
                request failed and the first retry is about to be made.
            response: The response of that attempt, or ``None`` if it
                failed with a transport error.

        Returns:
            The delay in seconds before the next attempt.
        """
