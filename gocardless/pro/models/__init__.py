"""Data models for API resources.

Architecture:
    All models are Pydantic v2 and immutable (frozen=True): the client only
    ever holds snapshots returned by the API, never live objects.

Model Categories:
    - Framework: Resource, Page, Cursors
    - Resources: Creditor, CreditorLinks
"""

from .creditor import Creditor, CreditorLinks
from .page import Cursors, Page
from .resource import Resource

__all__ = [
    "Creditor",
    "CreditorLinks",
    "Cursors",
    "Page",
    "Resource",
]
