r"""Utility functions shared by the retry executors."""

from __future__ import annotations

__all__ = [
    "ReplayableByteStream",
    "abuffer_request_body",
    "buffer_request_body",
    "parse_retry_after",
    "wait",
]

from httpretry.utils.body import ReplayableByteStream, abuffer_request_body, buffer_request_body
from httpretry.utils.retry_after import parse_retry_after
from httpretry.utils.sleep import wait
