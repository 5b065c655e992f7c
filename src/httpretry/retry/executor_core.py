r"""Shared core logic for the sync and async retry executors."""

from __future__ import annotations

__all__ = ["aclose_response", "close_response", "compose_result"]

import logging
from typing import TYPE_CHECKING

from httpretry.exceptions import MultiError

if TYPE_CHECKING:
    import httpx

    from httpretry.policies import ErrorHandler

logger: logging.Logger = logging.getLogger(__name__)


def close_response(response: httpx.Response | None) -> None:
    """Close the body of a superseded response, if any."""
    if response is not None:
        response.close()


async def aclose_response(response: httpx.Response | None) -> None:
    """Asynchronous counterpart of ``close_response``."""
    if response is not None:
        await response.aclose()


def compose_result(
    response: httpx.Response | None,
    errors: list[Exception],
    num_retries: int,
    error_handler: ErrorHandler | None = None,
) -> httpx.Response | None:
    """Compose the final result of a request from its last attempt.

    Args:
        response: The response of the last attempt, or ``None`` if it
            failed with a transport error.
        errors: The errors accumulated over all the attempts.
        num_retries: The number of attempts made beyond the first one.
        error_handler: Optional handler replacing the default
            composition.

    Returns:
        The value returned by ``error_handler`` if it is configured,
        otherwise ``response``.

    Raises:
        MultiError: If at least one error was accumulated and no
            ``error_handler`` is configured. The last response is
            attached to the error.
    """
    error = MultiError(errors, response=response) if errors else None
    if error_handler is not None:
        return error_handler(response, error, num_retries)
    if error is not None:
        logger.debug(f"Request failed after {num_retries + 1} attempt(s): {error}")
        raise error from errors[-1]
    return response
