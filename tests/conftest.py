"""
tests/conftest.py

Shared pytest fixtures used by both unit and integration test suites.
All HTTP fixtures use respx.mock — no real network calls are made in any test.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from provider.porkbun_client import PorkbunClient

API_KEY = "pk1_test"
SECRET_API_KEY = "sk1_test"


# ---------------------------------------------------------------------------
# HTTP mock fixture — intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.Client calls.

    No real network traffic is allowed during tests. Use this fixture
    wherever PorkbunClient would normally make an outbound request.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ---------------------------------------------------------------------------
# Shared httpx.Client / PorkbunClient fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def http_client():
    """
    Yields a real httpx.Client instance for use in tests.

    Pair with the mock_http fixture so all requests are intercepted by respx.
    The client is closed after each test.
    """
    with httpx.Client() as client:
        yield client


@pytest.fixture()
def porkbun(http_client):
    """A PorkbunClient using the test key pair and the shared http_client."""
    return PorkbunClient(http_client, API_KEY, SECRET_API_KEY)
