"""API client bundling the resource services.

Example:
    >>> async with MetalClient(ClientConfig(headers={"X-Auth-Token": token})) as client:
    ...     batches = await client.batches.list(project_id, ListOptions(per_page=50))
"""

from __future__ import annotations

import logging

from .config import ClientConfig
from .runtime.rest import RESTTransport
from .services import BatchService, DeviceService, ProjectService

logger = logging.getLogger(__name__)


class MetalClient:
    """Entry point owning one transport shared by every service."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings (defaults to ``ClientConfig.from_env()``)
            transport: Optional pre-built transport, mainly for tests
        """
        self.config = config or ClientConfig.from_env()
        self._transport = transport or RESTTransport(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.request_headers(),
        )
        self.batches = BatchService(self._transport)
        self.devices = DeviceService(self._transport)
        self.projects = ProjectService(self._transport)
        logger.debug("Client initialized", extra={"base_url": self.config.base_url})

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> MetalClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
