"""Boundary between the browsing core and the backend.

The core only depends on this protocol. ``diskclient.AsyncNamespaceClient``
implements it over HTTP; tests substitute in-memory fakes.
"""

from typing import Protocol

from diskclient.models import ListPathResponse, PathMetadataResponse


class NamespaceGateway(Protocol):
    """Read-only namespace operations consumed by the browsing core.

    Implementations bound every call with their own timeout and report
    failures by raising; the core never retries.
    """

    async def list_path(self, root: str, partition: str, path: str) -> ListPathResponse:
        ...

    async def stat_path(self, root: str, partition: str, path: str) -> PathMetadataResponse:
        ...

    async def read_preview(self, path: str) -> str:
        ...


def describe_failure(exc: BaseException) -> str:
    """Render a gateway exception as a message for display."""
    text = str(exc).strip()
    if text:
        return text
    return exc.__class__.__name__
