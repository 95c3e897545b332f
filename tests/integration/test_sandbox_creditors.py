"""Integration tests against the sandbox creditors endpoint."""

import os

import pytest

from gocardless.pro import Client, Creditor, Environment

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("RUN_GOCARDLESS_NETWORK_TESTS") != "1",
        reason="Requires network access. Set RUN_GOCARDLESS_NETWORK_TESTS=1 to run",
    ),
]


@pytest.mark.asyncio
async def test_list_single_page(sandbox_token):
    async with Client(sandbox_token, environment=Environment.SANDBOX) as client:
        page = await client.creditors.list().limit(1).execute()

    assert len(page.items) <= 1
    assert all(isinstance(c, Creditor) for c in page.items)


@pytest.mark.asyncio
async def test_iterate_and_get(sandbox_token):
    async with Client(sandbox_token, environment=Environment.SANDBOX) as client:
        creditors = [c async for c in client.creditors.all().limit(1)]
        if not creditors:
            pytest.skip("Sandbox account has no creditors")
        fetched = await client.creditors.get(creditors[0].id).execute()

    assert fetched.id == creditors[0].id
