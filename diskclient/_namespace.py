"""Namespace sub-client.

Covers the partition browsing endpoints (/api/disk/partition/*) and the
analyzer-based file read fallback (/analyze).

This is an internal module. Import from `diskclient` instead.
"""

from typing import Any

from diskclient._base import AsyncBaseClient
from diskclient.models import AnalyzeResponse, ListPathResponse, PathMetadataResponse

LIST_ENDPOINT = "/api/disk/partition/list"
STAT_ENDPOINT = "/api/disk/partition/stat"
ANALYZE_ENDPOINT = "/analyze"


def _partition_body(root: str, partition: str, path: str) -> dict[str, Any]:
    return {"diskPath": root, "partitionName": partition, "path": path}


def cat_command(path: str) -> str:
    """Build the analyzer command that prints a file's contents.

    The analyzer splits its input on whitespace, so paths containing
    spaces are wrapped in double quotes.

    Args:
        path: Absolute path of the file inside the logged-in partition.

    Returns:
        The ``cat`` command line.
    """
    if any(ch.isspace() for ch in path):
        return f'cat -path="{path}"'
    return f"cat -path={path}"


def _preview_text(data: Any) -> str:
    # The analyzer normally answers {"results": [...]}; anything else is
    # either raw text or an empty answer.
    if isinstance(data, dict):
        return AnalyzeResponse.model_validate(data).text
    if isinstance(data, str):
        return data
    return ""


class AsyncNamespaceClient(AsyncBaseClient):
    """Client for the namespace browsing endpoints.

    Structurally satisfies ``nsbrowser.gateway.NamespaceGateway`` and is the
    gateway used by ``NamespaceBrowser.from_config``.

    Example:
        async with AsyncDiskClient() as client:
            listing = await client.namespace.list_path("/tmp/d1.mia", "part1", "/")
            for entry in listing.entries:
                print(entry.type, entry.name)
    """

    async def list_path(self, root: str, partition: str, path: str) -> ListPathResponse:
        """List the children of a directory.

        Args:
            root: Disk image path, or ``BrowsingContext.HOST_FS`` for the
                host filesystem.
            partition: Partition name on that disk.
            path: Absolute directory path inside the partition.

        Returns:
            The entries of the directory and, at root, an optional
            ``auto_home`` suggestion.

        Raises:
            BadRequestError: If the backend cannot read the path.
            DiskClientError: For any other transport or API failure.
        """
        data = await self._post(LIST_ENDPOINT, json=_partition_body(root, partition, path))
        return ListPathResponse.model_validate(data)

    async def stat_path(self, root: str, partition: str, path: str) -> PathMetadataResponse:
        """Fetch metadata for a single path.

        Raises:
            DiskClientError: If the request fails.
        """
        data = await self._post(STAT_ENDPOINT, json=_partition_body(root, partition, path))
        return PathMetadataResponse.model_validate(data)

    async def read_preview(self, path: str) -> str:
        """Read a file's contents through the command analyzer.

        Runs ``cat`` against the currently logged-in partition and joins
        the output lines with newlines. No truncation happens here.

        Raises:
            DiskClientError: If the request fails.
        """
        data = await self._post(ANALYZE_ENDPOINT, json={"command": cat_command(path)})
        return _preview_text(data)
