"""Core components."""

from .envelope import ListMeta, decode, decode_list, encode
from .enums import Environment, HttpMethod
from .exceptions import (
    ApiErrorDetail,
    AuthenticationError,
    ErrorField,
    GoCardlessError,
    HttpError,
    IdempotentCreationConflictError,
    InternalServerError,
    InvalidApiUsageError,
    InvalidRequestError,
    InvalidStateError,
    MalformedEnvelope,
    MissingPathParameter,
    PermissionDeniedError,
    RateLimitError,
    TransportFailure,
    ValidationFailedError,
)
from .fields import FieldContainer, NestedFields
from .path import PathTemplate, resolve_path
from .request import (
    CreateRequest,
    GetRequest,
    ListRequest,
    Request,
    ResourceEndpoint,
    ResourceRequest,
    UpdateRequest,
)

__all__ = [
    # Field container
    "FieldContainer",
    "NestedFields",
    # Paths
    "PathTemplate",
    "resolve_path",
    # Envelope codec
    "ListMeta",
    "encode",
    "decode",
    "decode_list",
    # Requests
    "Request",
    "ResourceRequest",
    "ResourceEndpoint",
    "CreateRequest",
    "GetRequest",
    "UpdateRequest",
    "ListRequest",
    # Enums
    "Environment",
    "HttpMethod",
    # Errors
    "GoCardlessError",
    "TransportFailure",
    "HttpError",
    "ApiErrorDetail",
    "ErrorField",
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
