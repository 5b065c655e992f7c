from __future__ import annotations

import httpretry


def test_version() -> None:
    assert isinstance(httpretry.__version__, str)


def test_public_api() -> None:
    for name in httpretry.__all__:
        assert hasattr(httpretry, name), name
