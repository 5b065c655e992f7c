r"""Shared test helpers."""

from __future__ import annotations

__all__ = [
    "TEST_URL",
    "BodyRecorder",
    "create_mock_response",
    "create_request",
]

from typing import Any
from unittest.mock import Mock

import httpx

TEST_URL = "https://api.example.com/data"


def create_mock_response(status_code: int = 200, **kwargs: Any) -> Mock:
    """Create a mock httpx.Response with the given status code."""
    return Mock(spec=httpx.Response, status_code=status_code, **kwargs)


def create_request(method: str = "GET", url: str = TEST_URL, **kwargs: Any) -> httpx.Request:
    """Create a real httpx.Request."""
    return httpx.Request(method, url, **kwargs)


class BodyRecorder:
    """Executor side effect recording the body sent on every attempt.

    The body is read by iterating the request stream, the way a
    transport does.

    Args:
        outcomes: What to return (or raise) on each successive attempt.
    """

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.bodies: list[bytes] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(b"".join(request.stream))
        outcome = self.outcomes[min(len(self.bodies), len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
