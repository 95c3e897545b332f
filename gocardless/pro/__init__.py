"""GoCardless Pro - typed client for a cursor-paginated resource API."""

from .client import Client
from .config import API_VERSION, BASE_URLS, CLIENT_VERSION, get_base_url
from .core import (
    AuthenticationError,
    CreateRequest,
    Environment,
    FieldContainer,
    GetRequest,
    GoCardlessError,
    HttpError,
    IdempotentCreationConflictError,
    InternalServerError,
    InvalidApiUsageError,
    InvalidRequestError,
    InvalidStateError,
    ListRequest,
    MalformedEnvelope,
    MissingPathParameter,
    PathTemplate,
    PermissionDeniedError,
    RateLimitError,
    ResourceEndpoint,
    TransportFailure,
    UpdateRequest,
    ValidationFailedError,
)
from .models import Creditor, CreditorLinks, Cursors, Page, Resource
from .runtime import (
    PageIterator,
    RawResponse,
    RestRunner,
    RESTTransport,
    Transport,
    fetch_page,
    iterate,
)
from .services import CreditorService, ResourceService

__version__ = CLIENT_VERSION

__all__ = [
    "Client",
    # Config
    "API_VERSION",
    "BASE_URLS",
    "Environment",
    "get_base_url",
    # Framework
    "FieldContainer",
    "PathTemplate",
    "ResourceEndpoint",
    "CreateRequest",
    "GetRequest",
    "UpdateRequest",
    "ListRequest",
    "RestRunner",
    "RESTTransport",
    "Transport",
    "RawResponse",
    "PageIterator",
    "fetch_page",
    "iterate",
    # Models
    "Resource",
    "Page",
    "Cursors",
    "Creditor",
    "CreditorLinks",
    # Services
    "ResourceService",
    "CreditorService",
    # Errors
    "GoCardlessError",
    "TransportFailure",
    "HttpError",
    "InvalidApiUsageError",
    "InvalidStateError",
    "ValidationFailedError",
    "InternalServerError",
    "AuthenticationError",
    "PermissionDeniedError",
    "RateLimitError",
    "IdempotentCreationConflictError",
    "MalformedEnvelope",
    "MissingPathParameter",
    "InvalidRequestError",
]
