"""Entry point for talking to the disk simulation backend.

``AsyncDiskClient`` exposes the backend through namespaced sub-client
properties (``client.namespace``, ``client.partitions``).

Example::

    from diskclient import AsyncDiskClient

    async with AsyncDiskClient(base_url="http://localhost:3000") as client:
        parts = await client.partitions.list_partitions("/tmp/d1.mia")
        listing = await client.namespace.list_path("/tmp/d1.mia", "part1", "/")
"""

from typing import Any

from diskclient._http import AsyncHTTPClient
from diskclient._namespace import AsyncNamespaceClient
from diskclient._partitions import AsyncPartitionsClient
from diskclient.config import ClientConfig


def _resolve_config(config: ClientConfig | None, overrides: dict[str, Any]) -> ClientConfig:
    base = config or ClientConfig()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return base
    return base.model_copy(update=changes)


class AsyncDiskClient:
    """Client for the disk simulation backend.

    Attributes:
        config: The effective configuration.

    Example:
        Manual lifecycle management::

            client = AsyncDiskClient(ClientConfig(base_url="http://backend:3000"))
            try:
                await client.namespace.stat_path("/tmp/d1.mia", "part1", "/users.txt")
            finally:
                await client.close()
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        retry_enabled: bool | None = None,
        max_retries: int | None = None,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Base configuration (defaults to ``ClientConfig()``).
            base_url: Overrides ``config.base_url``.
            timeout: Overrides ``config.timeout``.
            retry_enabled: Overrides ``config.retry_enabled``.
            max_retries: Overrides ``config.max_retries``.
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
        """
        self.config = _resolve_config(
            config,
            {
                "base_url": base_url,
                "timeout": timeout,
                "retry_enabled": retry_enabled,
                "max_retries": max_retries,
            },
        )

        self._http = AsyncHTTPClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            retry_enabled=self.config.retry_enabled,
            max_retries=self.config.max_retries,
            transport=transport,
        )

        self._namespace: AsyncNamespaceClient | None = None
        self._partitions: AsyncPartitionsClient | None = None

    async def __aenter__(self) -> "AsyncDiskClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def namespace(self) -> AsyncNamespaceClient:
        """Access the namespace browsing endpoints (list, stat, read preview)."""
        if self._namespace is None:
            self._namespace = AsyncNamespaceClient(self._http)
        return self._namespace

    @property
    def partitions(self) -> AsyncPartitionsClient:
        """Access the partition listing endpoint."""
        if self._partitions is None:
            self._partitions = AsyncPartitionsClient(self._http)
        return self._partitions
