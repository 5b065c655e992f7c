r"""Backoff policies computing the wait between two attempts.

This package provides ready-to-use callables satisfying the ``Backoff``
contract: constant, linear and exponential delays, and a policy
honouring the ``Retry-After`` header.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoff",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "RetryAfterBackoff",
]

from httpretry.backoff.base import BaseBackoff
from httpretry.backoff.constant import ConstantBackoff
from httpretry.backoff.exponential import ExponentialBackoff
from httpretry.backoff.linear import LinearBackoff
from httpretry.backoff.retry_after import RetryAfterBackoff
