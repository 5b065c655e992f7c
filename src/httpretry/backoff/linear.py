r"""Linear backoff policy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from typing import TYPE_CHECKING

from httpretry.backoff.base import BaseBackoff

if TYPE_CHECKING:
    import httpx


class LinearBackoff(BaseBackoff):
    """Linear backoff policy.

    Calculates delay as: base_delay * (attempt + 1), with optional max_delay cap.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from httpretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0)
        >>> backoff(0)
        1.0
        >>> backoff(2)
        3.0
        >>> backoff = LinearBackoff(base_delay=2.0, max_delay=5.0)
        >>> backoff(5)  # Would be 12.0, but capped
        5.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
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
        return self.base_delay * (attempt + 1)
