from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_executor(mock_response: httpx.Response) -> Mock:
    """Create a mock executor returning ``mock_response``."""
    return Mock(spec=httpx.Client, send=Mock(return_value=mock_response))


@pytest.fixture
def mock_async_executor(mock_response: httpx.Response) -> Mock:
    """Create a mock async executor returning ``mock_response``."""
    return Mock(
        spec=httpx.AsyncClient,
        send=AsyncMock(return_value=mock_response),
        aclose=AsyncMock(),
    )


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing hooks and policies."""
    return Mock()
