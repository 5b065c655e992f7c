r"""Unit tests for the configuration constants and ClientConfig."""

from __future__ import annotations

import dataclasses
from unittest.mock import Mock

import pytest

from httpretry.backoff import ConstantBackoff, ExponentialBackoff
from httpretry.core.config import (
    DEFAULT_BACKOFF,
    DEFAULT_BACKOFF_DELAY,
    DEFAULT_RETRY_COUNT,
    DEFAULT_TIMEOUT,
    SERVER_ERROR_STATUS,
    ClientConfig,
)

######################################
#     Tests for Configuration       #
######################################


def test_default_timeout_value() -> None:
    assert DEFAULT_TIMEOUT == 60.0


def test_default_retry_count_value() -> None:
    assert DEFAULT_RETRY_COUNT == 0


def test_default_backoff_is_constant() -> None:
    assert isinstance(DEFAULT_BACKOFF, ConstantBackoff)
    assert DEFAULT_BACKOFF(0, None) == DEFAULT_BACKOFF_DELAY == 0.5
    assert DEFAULT_BACKOFF(7, None) == 0.5


def test_server_error_status_value() -> None:
    assert SERVER_ERROR_STATUS == 500


##################################
#     Tests for ClientConfig     #
##################################


def test_client_config_defaults() -> None:
    config = ClientConfig()
    assert config.base_url == ""
    assert config.retry_count == 0
    assert config.timeout == 60.0
    assert config.request_hook is None
    assert config.response_hook is None
    assert config.error_hook is None
    assert config.check_retry is None
    assert config.backoff is DEFAULT_BACKOFF
    assert config.error_handler is None
    assert config.executor is None


def test_client_config_is_frozen() -> None:
    config = ClientConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.retry_count = 3  # type: ignore[misc]


def test_client_config_negative_retry_count() -> None:
    with pytest.raises(ValueError, match=r"retry_count must be >= 0, got -1"):
        ClientConfig(retry_count=-1)


def test_client_config_non_integer_retry_count() -> None:
    with pytest.raises(TypeError, match=r"retry_count must be an integer, got float"):
        ClientConfig(retry_count=1.5)  # type: ignore[arg-type]


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_client_config_invalid_timeout(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        ClientConfig(timeout=timeout)


def test_client_config_none_backoff() -> None:
    with pytest.raises(ValueError, match=r"backoff must not be None"):
        ClientConfig(backoff=None)  # type: ignore[arg-type]


def test_client_config_merge() -> None:
    config = ClientConfig(retry_count=3)
    backoff = ExponentialBackoff()
    merged = config.merge(retry_count=5, backoff=backoff)

    assert merged.retry_count == 5
    assert merged.backoff is backoff
    assert config.retry_count == 3
    assert config.backoff is DEFAULT_BACKOFF


def test_client_config_merge_ignores_none() -> None:
    hook = Mock()
    config = ClientConfig(retry_count=3, request_hook=hook)
    merged = config.merge(retry_count=None, request_hook=None, backoff=None)

    assert merged == config
    assert merged.request_hook is hook


def test_client_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"retry_count must be >= 0"):
        ClientConfig().merge(retry_count=-2)
