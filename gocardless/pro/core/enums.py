"""Core enumerations.

Key Types:
    - HttpMethod: Verbs used by the request variants
    - Environment: API environment a client talks to
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used by resource requests."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class Environment(str, Enum):
    """API environment.

    Sandbox accepts test credentials only and never moves real money.
    """

    LIVE = "live"
    SANDBOX = "sandbox"
