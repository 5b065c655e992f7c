from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from httpretry.utils.retry_after import parse_retry_after


def test_parse_retry_after_none() -> None:
    assert parse_retry_after(None) is None


@pytest.mark.parametrize(("header", "expected"), [("0", 0.0), ("120", 120.0), ("1.5", 1.5)])
def test_parse_retry_after_seconds(header: str, expected: float) -> None:
    assert parse_retry_after(header) == expected


def test_parse_retry_after_negative_seconds() -> None:
    assert parse_retry_after("-5") == 0.0


def test_parse_retry_after_http_date_in_future() -> None:
    header = format_datetime(datetime.now(timezone.utc) + timedelta(seconds=60), usegmt=True)
    assert 55.0 <= parse_retry_after(header) <= 60.0


def test_parse_retry_after_http_date_in_past() -> None:
    assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0


@pytest.mark.parametrize("header", ["invalid", "", "tomorrow"])
def test_parse_retry_after_invalid(header: str) -> None:
    assert parse_retry_after(header) is None


def test_parse_retry_after_huge_seconds() -> None:
    assert parse_retry_after("99999999999") == 99999999999.0


@pytest.mark.parametrize("header", ["inf", "-inf", "nan", "Infinity"])
def test_parse_retry_after_non_finite(header: str) -> None:
    assert parse_retry_after(header) is None
