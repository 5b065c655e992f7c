r"""Retry package: the execution engine of the HTTP clients.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - HookManager: Invocation of the lifecycle hooks
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "HookManager",
    "RetryDecider",
    "RetryExecutor",
    "compose_result",
]

from httpretry.retry.decider import RetryDecider
from httpretry.retry.executor import RetryExecutor
from httpretry.retry.executor_async import AsyncRetryExecutor
from httpretry.retry.executor_core import compose_result
from httpretry.retry.manager import HookManager
