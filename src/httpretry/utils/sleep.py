r"""Blocking waits between two attempts."""

from __future__ import annotations

__all__ = ["MAX_WAIT", "wait"]

import logging
import threading
import time

logger: logging.Logger = logging.getLogger(__name__)

# Longest wait accepted by time.sleep and threading.Event.wait on every platform.
MAX_WAIT: float = min(threading.TIMEOUT_MAX, float(2**31 - 1))


def wait(seconds: float, cancel_event: threading.Event | None = None) -> bool:
    """Block the current thread for ``seconds``.

    Args:
        seconds: The duration of the wait. Non-positive values return
            immediately. Values above ``MAX_WAIT`` are capped.
        cancel_event: Optional event aborting the wait when it is set,
            before or during the wait.

    Returns:
        ``True`` if the wait was cancelled, otherwise ``False``.

    Example:
        ```pycon
        >>> import threading
        >>> from httpretry.utils.sleep import wait
        >>> event = threading.Event()
        >>> event.set()
        >>> wait(10.0, cancel_event=event)
        True

        ```
    """
    seconds = min(seconds, MAX_WAIT)
    if cancel_event is None:
        if seconds > 0:
            time.sleep(seconds)
        return False
    if cancel_event.is_set():
        return True
    cancelled = cancel_event.wait(seconds) if seconds > 0 else False
    if cancelled:
        logger.debug(f"Wait of {seconds:.2f}s cancelled")
    return cancelled
