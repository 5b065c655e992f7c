r"""Retry-After header parsing utilities.

This module provides a function for parsing the Retry-After header
value of HTTP responses according to RFC 7231.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import math
from contextlib import suppress
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value of an HTTP response.

    The header is either a number of seconds (e.g. ``"120"``) or an
    HTTP-date (e.g. ``"Wed, 21 Oct 2015 07:28:00 GMT"``).

    Args:
        retry_after_header: The value of the Retry-After header, or
            ``None`` if the header is missing.

    Returns:
        The number of seconds to wait, or ``None`` if the header is
        missing or cannot be parsed (including ``"inf"`` and
        ``"nan"``). Negative values and dates in the past are clamped to
        0.0.

    Example:
        ```pycon
        >>> from httpretry.utils.retry_after import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    with suppress(ValueError):
        seconds = float(retry_after_header)
        if not math.isfinite(seconds):
            logger.debug(f"Ignoring non-finite Retry-After header: {retry_after_header!r}")
            return None
        return max(0.0, seconds)

    try:
        retry_date: datetime = parsedate_to_datetime(retry_after_header)
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_date - datetime.now(timezone.utc)).total_seconds())
