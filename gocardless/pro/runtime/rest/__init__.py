"""REST runtime abstractions."""

from .adapters import PageAdapter, ResourceAdapter, ResponseAdapter
from .http_client import HTTPClient, RawResponse
from .runner import RestRunner
from .transport import RESTTransport, Transport

__all__ = [
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "Transport",
    "RestRunner",
    "ResponseAdapter",
    "ResourceAdapter",
    "PageAdapter",
]
