"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from ..runtime.rest.http_client import RawResponse


class GoCardlessError(Exception):
    """Base exception for all library errors."""

    pass


class TransportFailure(GoCardlessError):
    """Network-level failure (connection reset, DNS, timeout).

    The request may or may not have reached the server.
    """

    pass


class MalformedEnvelope(GoCardlessError):
    """Response body did not match the expected envelope shape."""

    def __init__(self, message: str, envelope: str | None = None) -> None:
        super().__init__(message)
        self.envelope = envelope


class MissingPathParameter(GoCardlessError):
    """A path template placeholder had no value supplied."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidRequestError(GoCardlessError, ValueError):
    """Request was constructed in a way the API cannot accept."""

    pass


class ErrorField(BaseModel):
    """One entry of the ``errors`` array in an API error body."""

    field: str | None = None
    message: str | None = None
    reason: str | None = None
    request_pointer: str | None = None
    links: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="allow")


class ApiErrorDetail(BaseModel):
    """Structured error payload returned under the ``error`` key."""

    message: str = ""
    type: str | None = None
    code: int | None = None
    request_id: str | None = None
    documentation_url: str | None = None
    errors: list[ErrorField] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")


class HttpError(GoCardlessError):
    """Server rejected the request with a non-2xx status.

    ``error`` holds the decoded error payload when the server returned one,
    otherwise it is None and ``body`` carries the raw response text.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error: ApiErrorDetail | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.body = body

    @property
    def request_id(self) -> str | None:
        return self.error.request_id if self.error else None

    @property
    def errors(self) -> list[ErrorField]:
        return list(self.error.errors) if self.error else []

    @classmethod
    def from_response(cls, response: RawResponse) -> HttpError:
        """Build the most specific error for a non-2xx response."""
        detail = _parse_error_detail(response.body)
        if detail is not None and detail.message:
            message = detail.message
        else:
            message = f"HTTP {response.status}"

        if response.status == 429:
            return RateLimitError(
                message,
                error=detail,
                body=response.text,
                retry_after=_parse_retry_after(response.headers),
            )
        if response.status == 401:
            return AuthenticationError(message, 401, detail, response.text)
        if response.status == 403:
            return PermissionDeniedError(message, 403, detail, response.text)
        if detail is not None:
            if any(e.reason == "idempotent_creation_conflict" for e in detail.errors):
                return IdempotentCreationConflictError(
                    message, response.status, detail, response.text
                )
            error_cls = _ERRORS_BY_TYPE.get(detail.type or "")
            if error_cls is not None:
                return error_cls(message, response.status, detail, response.text)
        return cls(message, response.status, detail, response.text)


class InvalidApiUsageError(HttpError):
    """Request was malformed or used the API incorrectly."""

    pass


class InvalidStateError(HttpError):
    """Action is not allowed in the resource's current state."""

    pass


class ValidationFailedError(HttpError):
    """One or more submitted fields failed server-side validation."""

    pass


class InternalServerError(HttpError):
    """Server-side fault."""

    pass


class AuthenticationError(HttpError):
    """Access token missing, revoked or invalid."""

    pass


class PermissionDeniedError(HttpError):
    """Access token lacks the scope for this endpoint."""

    pass


class RateLimitError(HttpError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str,
        error: ApiErrorDetail | None = None,
        body: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, 429, error, body)
        self.retry_after = retry_after


class IdempotentCreationConflictError(InvalidStateError):
    """A create with the same idempotency key already succeeded."""

    @property
    def conflicting_resource_id(self) -> str | None:
        for entry in self.errors:
            if entry.reason == "idempotent_creation_conflict":
                return entry.links.get("conflicting_resource_id")
        return None


_ERRORS_BY_TYPE: dict[str, type[HttpError]] = {
    "invalid_api_usage": InvalidApiUsageError,
    "invalid_state": InvalidStateError,
    "validation_failed": ValidationFailedError,
    "gocardless": InternalServerError,
}


def _parse_error_detail(body: Any) -> ApiErrorDetail | None:
    if not isinstance(body, dict):
        return None
    payload = body.get("error")
    if not isinstance(payload, dict):
        return None
    try:
        return ApiErrorDetail.model_validate(payload)
    except PydanticValidationError:
        return None


def _parse_retry_after(headers: dict[str, str]) -> int | None:
    for name, value in headers.items():
        if name.lower() == "retry-after":
            try:
                return int(value)
            except ValueError:
                return None
    return None
