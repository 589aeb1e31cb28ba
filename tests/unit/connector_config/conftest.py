"""Fixtures for connector config unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def valid_raw_config() -> dict[str, str]:
    """Raw connector config that passes every rule."""

    return {
        "url": "https://materialize.example.com",
        "table": "t1",
        "key": "k1",
    }


@pytest.fixture
def identifier_63() -> str:
    return "a" * 63


@pytest.fixture
def identifier_64() -> str:
    return "a" * 64
