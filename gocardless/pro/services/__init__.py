"""Resource services."""

from .base import ResourceService
from .creditors import (
    CREDITORS,
    CreditorCreateLinks,
    CreditorCreateRequestBuilder,
    CreditorService,
    CreditorUpdateLinks,
    CreditorUpdateRequestBuilder,
)

__all__ = [
    "CREDITORS",
    "CreditorCreateLinks",
    "CreditorCreateRequestBuilder",
    "CreditorService",
    "CreditorUpdateLinks",
    "CreditorUpdateRequestBuilder",
    "ResourceService",
]
