"""Shared fixtures for integration tests."""

import os

import pytest

@pytest.fixture
def sandbox_token():
    token = os.environ.get("GOCARDLESS_SANDBOX_TOKEN")
    if not token:
        pytest.skip("GOCARDLESS_SANDBOX_TOKEN is not set")
    return token
