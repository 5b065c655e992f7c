r"""Constant backoff policy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from typing import TYPE_CHECKING

from httpretry.backoff.base import BaseBackoff

if TYPE_CHECKING:
    import httpx


class ConstantBackoff(BaseBackoff):
    """Constant/fixed backoff policy.

    Returns the same delay for every attempt, regardless of the attempt
    index or the response. This is the default policy of the client, with
    a delay of 0.5 seconds.

    Args:
        delay: The fixed delay in seconds (default: 0.5).

    Example:
        ```pycon
        >>> from httpretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff(0)
        2.5
        >>> backoff(10)
        2.5

        ```
    """

    def __init__(self, delay: float = 0.5) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        super().__init__()
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(
        self,
        attempt: int,  # noqa: ARG002
        response: httpx.Response | None = None,  # noqa: ARG002
    ) -> float:
        return self.delay
