"""Base class for the sub-clients.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from diskclient._http import AsyncHTTPClient


class AsyncBaseClient:
    """Holds the HTTP client shared by every sub-client of one AsyncDiskClient."""

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        self._http = http_client

    async def _post(self, path: str, json: dict[str, Any] | None = None) -> Any:
        return await self._http.post(path, json=json)
