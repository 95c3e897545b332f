"""Precise unit tests for the request descriptors.

Tests focus on method, path, query and body production per variant.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gocardless.pro.core import (
    CreateRequest,
    GetRequest,
    HttpMethod,
    InvalidRequestError,
    ListRequest,
    MissingPathParameter,
    ResourceEndpoint,
    UpdateRequest,
)
from gocardless.pro.models import Creditor

ENDPOINT = ResourceEndpoint.for_collection("creditors", Creditor)


class TestResourceEndpoint:
    def test_for_collection_convention(self):
        """Test paths and envelope follow the collection name."""
        assert ENDPOINT.envelope == "creditors"
        assert ENDPOINT.collection_path == "/creditors"
        assert ENDPOINT.member_path == "/creditors/:identity"
        assert ENDPOINT.model is Creditor


class TestCreateRequest:
    def test_post_with_enveloped_body(self):
        """Test create is a POST to the collection with a wrapped body."""
        request = CreateRequest(endpoint=ENDPOINT, fields={"name": "Acme"})

        assert request.method == HttpMethod.POST
        assert request.has_body is True
        assert request.path() == "/creditors"
        assert request.body() == {"creditors": {"name": "Acme"}}
        assert request.query_params() == {}

    def test_idempotency_key_generated(self):
        """Test each create gets its own Idempotency-Key header."""
        first = CreateRequest(endpoint=ENDPOINT)
        second = CreateRequest(endpoint=ENDPOINT)

        assert first.request_headers()["Idempotency-Key"]
        assert first.idempotency_key != second.idempotency_key

    def test_custom_headers_merged(self):
        """Test caller headers are sent alongside the idempotency key."""
        request = CreateRequest(
            endpoint=ENDPOINT, idempotency_key="key-1", headers={"X-Trace": "t1"}
        )
        assert request.request_headers() == {"Idempotency-Key": "key-1", "X-Trace": "t1"}

    def test_request_is_frozen(self):
        """Test descriptors cannot be mutated after construction."""
        request = CreateRequest(endpoint=ENDPOINT)
        with pytest.raises(FrozenInstanceError):
            request.fields = {"name": "x"}


class TestGetRequest:
    def test_get_member_path(self):
        """Test get resolves the identity into the member path."""
        request = GetRequest(endpoint=ENDPOINT, identity="CR123")

        assert request.method == HttpMethod.GET
        assert request.has_body is False
        assert request.path() == "/creditors/CR123"
        assert request.body() is None

    def test_empty_identity_fails_fast(self):
        """Test an empty identity never produces a partial path."""
        request = GetRequest(endpoint=ENDPOINT, identity="")
        with pytest.raises(MissingPathParameter):
            request.path()


class TestUpdateRequest:
    def test_put_member_path_with_body(self):
        """Test update is a PUT with identity in the path only."""
        request = UpdateRequest(endpoint=ENDPOINT, identity="CR123", fields={"city": "London"})

        assert request.method == HttpMethod.PUT
        assert request.has_body is True
        assert request.path() == "/creditors/CR123"
        assert request.body() == {"creditors": {"city": "London"}}

    def test_identity_not_allowed_in_body(self):
        """Test identity cannot be smuggled in as a body field."""
        with pytest.raises(InvalidRequestError):
            UpdateRequest(endpoint=ENDPOINT, identity="CR123", fields={"identity": "CR9"})


class TestListRequest:
    def test_query_includes_only_set_values(self):
        """Test unset pagination controls are omitted from the query."""
        request = ListRequest(endpoint=ENDPOINT, limit=50, filters={"created_at[gt]": "2024"})

        assert request.method == HttpMethod.GET
        assert request.path() == "/creditors"
        assert request.query_params() == {"limit": 50, "created_at[gt]": "2024"}

    def test_empty_query(self):
        """Test a bare list request has an empty query."""
        assert ListRequest(endpoint=ENDPOINT).query_params() == {}

    def test_both_cursors_rejected(self):
        """Test after and before are mutually exclusive."""
        with pytest.raises(InvalidRequestError, match="mutually exclusive"):
            ListRequest(endpoint=ENDPOINT, after="c1", before="c0")

    def test_non_integer_limit_rejected(self):
        """Test limit must be an int."""
        with pytest.raises(InvalidRequestError):
            ListRequest(endpoint=ENDPOINT, limit="50")

    def test_no_client_side_limit_bound(self):
        """Test large limits are passed through for the server to judge."""
        assert ListRequest(endpoint=ENDPOINT, limit=10_000).query_params() == {"limit": 10_000}

    def test_pagination_keys_rejected_as_filters(self):
        """Test cursors must use the dedicated fields."""
        with pytest.raises(InvalidRequestError):
            ListRequest(endpoint=ENDPOINT, filters={"after": "c1"})

    def test_with_after_returns_copy(self):
        """Test with_after() leaves the original untouched."""
        request = ListRequest(endpoint=ENDPOINT, limit=2)
        continued = request.with_after("c1")

        assert continued.query_params() == {"after": "c1", "limit": 2}
        assert request.after is None
