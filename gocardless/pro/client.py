"""Top-level API client."""

from __future__ import annotations

from .config import DEFAULT_TIMEOUT, get_base_url
from .core.enums import Environment
from .runtime.rest import RestRunner, RESTTransport, Transport
from .services import CreditorService


class Client:
    """Entry point wiring a transport to the resource services.

    Example:
        >>> async with Client("sandbox_token", environment=Environment.SANDBOX) as client:
        ...     creditor = await client.creditors.get("CR123").execute()
        ...     async for creditor in client.creditors.all().limit(50):
        ...         print(creditor.name)
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        environment: Environment | str = Environment.LIVE,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            access_token: Bearer token sent with every request
            environment: Selects the base URL when base_url is not given
            base_url: Overrides the environment's base URL
            timeout: Total per-request timeout in seconds
            transport: Custom Transport; access_token, base_url and timeout
                are ignored when one is supplied
        """
        if transport is None:
            if not access_token:
                raise ValueError("access_token is required when no transport is given")
            transport = RESTTransport(
                base_url or get_base_url(environment),
                access_token=access_token,
                timeout=timeout,
            )
        self._transport = transport
        self._runner = RestRunner(transport)
        self._creditors = CreditorService(self._runner)

    @property
    def runner(self) -> RestRunner:
        return self._runner

    @property
    def creditors(self) -> CreditorService:
        return self._creditors

    async def close(self) -> None:
        """Close the transport if it owns resources."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
