"""Base model for API resources."""

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """Immutable snapshot of a server-side resource.

    Unknown fields returned by the API are kept (``extra="allow"``) so newer
    API versions do not break decoding.
    """

    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")
