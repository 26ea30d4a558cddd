"""Disk Simulation API Client Library.

This package provides a typed asynchronous Python client for the
disk/partition simulation backend: listing and inspecting the namespace of
a partition, reading file previews through the command analyzer, and
listing the partitions of a disk image.

Example::

    from diskclient import AsyncDiskClient

    async with AsyncDiskClient(base_url="http://localhost:3000") as client:
        meta = await client.namespace.stat_path("/tmp/d1.mia", "part1", "/users.txt")

Exports:
    AsyncDiskClient: The client.
    ClientConfig: Explicit connection settings.

    Exceptions:
        DiskClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the backend.
        TimeoutError: Request timed out.
        APIError: Backend returned an error response.
        BadRequestError: Request rejected (HTTP 400).
        NotFoundError: Resource not found (HTTP 404).
        ValidationError: Request validation failed (HTTP 422).
        ServerError: Server-side error (HTTP 5xx).
"""

from diskclient._namespace import AsyncNamespaceClient
from diskclient._partitions import AsyncPartitionsClient
from diskclient.client import AsyncDiskClient
from diskclient.config import MAX_PREVIEW_CHARS, ClientConfig
from diskclient.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    DiskClientError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from diskclient.models import (
    AnalyzeResponse,
    ListPartitionsResponse,
    ListPathResponse,
    NamespaceEntry,
    PartitionSummary,
    PathMetadataResponse,
)

__all__ = [
    # Client
    "AsyncDiskClient",
    "ClientConfig",
    "MAX_PREVIEW_CHARS",
    # Sub-clients
    "AsyncNamespaceClient",
    "AsyncPartitionsClient",
    # Exceptions
    "DiskClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "BadRequestError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
    # Models
    "AnalyzeResponse",
    "ListPartitionsResponse",
    "ListPathResponse",
    "NamespaceEntry",
    "PartitionSummary",
    "PathMetadataResponse",
]
