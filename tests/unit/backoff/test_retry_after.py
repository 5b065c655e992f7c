from __future__ import annotations

from unittest.mock import Mock

import httpx

from httpretry.backoff import ConstantBackoff, LinearBackoff, RetryAfterBackoff

#######################################
#     Tests for RetryAfterBackoff     #
#######################################


def test_retry_after_backoff_uses_header() -> None:
    backoff = RetryAfterBackoff()
    assert backoff(0, httpx.Response(429, headers={"Retry-After": "7"})) == 7.0


def test_retry_after_backoff_fallback_without_header() -> None:
    backoff = RetryAfterBackoff(fallback=LinearBackoff(base_delay=1.0))
    assert backoff(2, httpx.Response(503)) == 3.0


def test_retry_after_backoff_fallback_without_response() -> None:
    fallback = Mock(return_value=4.0)
    assert RetryAfterBackoff(fallback=fallback)(1, None) == 4.0
    fallback.assert_called_once_with(1, None)


def test_retry_after_backoff_fallback_invalid_header() -> None:
    backoff = RetryAfterBackoff(fallback=ConstantBackoff(delay=1.5))
    assert backoff(0, httpx.Response(503, headers={"Retry-After": "soon"})) == 1.5


def test_retry_after_backoff_default_fallback() -> None:
    assert RetryAfterBackoff()(0, None) == 0.5


def test_retry_after_backoff_max_delay() -> None:
    backoff = RetryAfterBackoff(max_delay=10.0)
    assert backoff(0, httpx.Response(503, headers={"Retry-After": "3600"})) == 10.0


def test_retry_after_backoff_fallback_non_finite_header() -> None:
    backoff = RetryAfterBackoff(fallback=ConstantBackoff(delay=2.0))
    assert backoff(0, httpx.Response(503, headers={"Retry-After": "inf"})) == 2.0
