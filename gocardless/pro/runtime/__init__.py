"""Runtime orchestration components."""

from .pagination import PageIterator, fetch_page, iterate
from .rest import (
    HTTPClient,
    PageAdapter,
    RawResponse,
    ResourceAdapter,
    ResponseAdapter,
    RestRunner,
    RESTTransport,
    Transport,
)

__all__ = [
    "HTTPClient",
    "PageAdapter",
    "PageIterator",
    "RawResponse",
    "ResourceAdapter",
    "ResponseAdapter",
    "RestRunner",
    "RESTTransport",
    "Transport",
    "fetch_page",
    "iterate",
]
