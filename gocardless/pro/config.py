"""Client configuration constants.

This module centralizes base URLs and protocol versions so the transport and
client can stay small and focused.
"""

from __future__ import annotations

from .core.enums import Environment

# Environment-specific REST base URLs
BASE_URLS = {
    Environment.LIVE: "https://api.gocardless.com",
    Environment.SANDBOX: "https://api-sandbox.gocardless.com",
}

# Sent as the GoCardless-Version header on every request
API_VERSION = "2015-07-06"

DEFAULT_TIMEOUT = 30.0

CLIENT_VERSION = "0.1.0"
USER_AGENT = f"gocardless-pro-python/{CLIENT_VERSION}"


def get_base_url(environment: Environment | str) -> str:
    """Get the REST base URL for an environment.

    Examples:
        >>> get_base_url(Environment.SANDBOX)
        'https://api-sandbox.gocardless.com'
        >>> get_base_url("live")
        'https://api.gocardless.com'
    """
    return BASE_URLS[Environment(environment)]
