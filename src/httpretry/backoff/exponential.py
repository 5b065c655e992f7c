r"""Exponential backoff policy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from typing import TYPE_CHECKING

from httpretry.backoff.base import BaseBackoff

if TYPE_CHECKING:
    import httpx


class ExponentialBackoff(BaseBackoff):
    """Exponential backoff policy.

    Calculates delay as: base_delay * (2 ** attempt), with optional max_delay cap.

    Args:
        base_delay: The base delay factor in seconds (default: 0.3).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from httpretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff(0)
        0.5
        >>> backoff(1)
        1.0
        >>> backoff(2)
        2.0
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff(10)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        super().__init__(max_delay=max_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(
        self,
        attempt: int,
        response: httpx.Response | None = None,  # noqa: ARG002
    ) -> float:
        return self.base_delay * (2**attempt)
