"""Directory loading with the one-shot auto-home redirect.

On first entry into a namespace the backend may not have a useful root and
instead suggests a starting directory (``autoHome``, typically the user's
home). The loader follows that suggestion once, and only for root.
"""

import logging
from typing import Any

from diskclient.models import ListPathResponse
from nsbrowser.errors import LoadError
from nsbrowser.gateway import NamespaceGateway, describe_failure
from nsbrowser.models import BrowsingContext, Entry, Listing
from nsbrowser.paths import is_root, normalize

logger = logging.getLogger(__name__)


class DirectoryLoader:
    """Turns a ``(context, path)`` request into an authoritative Listing.

    Attributes:
        gateway: The namespace gateway used for list calls.
    """

    def __init__(self, gateway: NamespaceGateway) -> None:
        self.gateway = gateway

    async def load(self, context: BrowsingContext, path: str | None) -> Listing:
        """Load the entries of ``path`` in ``context``.

        If the requested path is root and the backend answers with an
        ``autoHome`` suggestion, the suggested directory is listed instead
        and becomes the Listing's path. A suggestion carried by that second
        answer is ignored.

        Args:
            context: The namespace being browsed.
            path: Requested directory; ``None`` and ``""`` mean root.

        Returns:
            The Listing for the requested (or redirected) path.

        Raises:
            LoadError: If any gateway call fails or returns an unusable body.
        """
        requested = normalize(path)
        listing, auto_home = await self._list(context, requested)

        if auto_home and is_root(path):
            home = normalize(auto_home)
            logger.info(f"Auto-home redirect from {requested} to {home} in {context.root}")
            listing, _ = await self._list(context, home)

        return listing

    async def _list(self, context: BrowsingContext, path: str) -> tuple[Listing, str | None]:
        """List ``path`` and return it with the backend's home suggestion, if any."""
        logger.debug(f"Listing {path} in {context.root}:{context.partition}")
        try:
            response = _coerce_listing(
                await self.gateway.list_path(context.root, context.partition, path)
            )
            entries = tuple(
                Entry(name=entry.name, type=entry.type) for entry in response.entries
            )
            return Listing(path=path, entries=entries), response.auto_home
        except Exception as e:
            message = describe_failure(e)
            logger.warning(f"Listing {path} failed: {message}")
            raise LoadError(message, path=path, cause=e) from e


def _coerce_listing(raw: Any) -> ListPathResponse:
    if isinstance(raw, ListPathResponse):
        return raw
    return ListPathResponse.model_validate(raw)
