r"""Define the exceptions raised by the HTTP client."""

from __future__ import annotations

__all__ = [
    "HttpClientError",
    "MultiError",
    "RequestBuildError",
    "RetryCancelledError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx


class HttpClientError(Exception):
    """Base class of all the errors raised by ``httpretry``."""


class RequestBuildError(HttpClientError):
    """Raised when a request cannot be built from its method and URL.

    No attempt is made when this error is raised.

    Args:
        method: The HTTP method of the request.
        url: The (base URL prefixed) target of the request.
        message: Optional custom message. Defaults to
            ``"<METHOD> - request creation failed"``.

    Example:
        ```pycon
        >>> from httpretry.exceptions import RequestBuildError
        >>> error = RequestBuildError(method="GET", url="http://[::1")
        >>> str(error)
        'GET - request creation failed'

        ```
    """

    def __init__(self, method: str, url: str, message: str | None = None) -> None:
        super().__init__(message or f"{method} - request creation failed")
        self.method = method
        self.url = url


class RetryCancelledError(HttpClientError):
    """Recorded when a backoff wait is cancelled by the caller.

    Args:
        attempt: The index of the attempt after which the wait was
            cancelled (0-indexed).
    """

    def __init__(self, attempt: int) -> None:
        super().__init__(f"retry wait cancelled after attempt {attempt + 1}")
        self.attempt = attempt


class MultiError(HttpClientError):
    """Aggregate of all the errors recorded while executing a request.

    The errors are kept in the order in which they occurred: transport
    errors, errors returned by a check-retry policy, and cancellation
    errors.

    Args:
        errors: The accumulated errors. Must not be empty.
        response: The last response received, if any. The caller owns
            its body.

    Example:
        ```pycon
        >>> from httpretry.exceptions import MultiError
        >>> error = MultiError([ValueError("refused"), ValueError("refused again")])
        >>> str(error)
        '2 errors occurred: refused; refused again'
        >>> error.messages
        ['refused', 'refused again']

        ```
    """

    def __init__(
        self,
        errors: Iterable[Exception],
        response: httpx.Response | None = None,
    ) -> None:
        self.errors: list[Exception] = list(errors)
        if not self.errors:
            msg = "MultiError requires at least one error"
            raise ValueError(msg)
        self.response = response
        super().__init__(self._render())

    @property
    def messages(self) -> list[str]:
        """The message of each accumulated error."""
        return [str(error) for error in self.errors]

    def __len__(self) -> int:
        return len(self.errors)

    def _render(self) -> str:
        noun = "error" if len(self.errors) == 1 else "errors"
        return f"{len(self.errors)} {noun} occurred: {'; '.join(self.messages)}"
