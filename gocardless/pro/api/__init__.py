"""Fluent request builders."""

from .request_builder import (
    CreateRequestBuilder,
    GetRequestBuilder,
    IteratingListRequestBuilder,
    ListRequestBuilder,
    PagingListRequestBuilder,
    RequestBuilder,
    UpdateRequestBuilder,
)

__all__ = [
    "RequestBuilder",
    "CreateRequestBuilder",
    "GetRequestBuilder",
    "UpdateRequestBuilder",
    "ListRequestBuilder",
    "PagingListRequestBuilder",
    "IteratingListRequestBuilder",
]
