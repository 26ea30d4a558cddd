"""Partition listing sub-client.

Used by the disk selection screen to turn a disk image path into the
``(root, partition)`` pair that identifies a browsing context.

This is an internal module. Import from `diskclient` instead.
"""

from diskclient._base import AsyncBaseClient
from diskclient.models import ListPartitionsResponse

PARTITIONS_ENDPOINT = "/api/disk/partitions"


class AsyncPartitionsClient(AsyncBaseClient):
    """Client for /api/disk/partitions."""

    async def list_partitions(self, disk_path: str) -> ListPartitionsResponse:
        """List the partitions of a disk image.

        Args:
            disk_path: Path of the disk image on the backend host.

        Returns:
            The partitions found on the disk, in on-disk order.

        Raises:
            DiskClientError: If the request fails.
        """
        data = await self._post(PARTITIONS_ENDPOINT, json={"path": disk_path})
        return ListPartitionsResponse.model_validate(data or {})
