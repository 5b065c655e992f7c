from __future__ import annotations

import pytest

from httpretry.core.validation import validate_retry_count, validate_timeout


@pytest.mark.parametrize("retry_count", [0, 1, 10])
def test_validate_retry_count_valid(retry_count: int) -> None:
    validate_retry_count(retry_count)


def test_validate_retry_count_negative() -> None:
    with pytest.raises(ValueError, match=r"retry_count must be >= 0, got -1"):
        validate_retry_count(-1)


@pytest.mark.parametrize("retry_count", [True, 1.0, "3"])
def test_validate_retry_count_not_an_integer(retry_count: object) -> None:
    with pytest.raises(TypeError, match=r"retry_count must be an integer"):
        validate_retry_count(retry_count)  # type: ignore[arg-type]


@pytest.mark.parametrize("timeout", [0.1, 1, 60.0])
def test_validate_timeout_valid(timeout: float) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -5.0])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)
