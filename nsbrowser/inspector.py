"""File inspector: metadata and content preview of the selected file.

Metadata is fetched automatically whenever the selection changes; the
content preview only on explicit request, since files may be large or not
text at all. The two fetches are independent streams with their own error
slots, and a result that arrives after the selection moved on is dropped.
"""

import logging
from typing import Any, Callable

from diskclient.config import MAX_PREVIEW_CHARS
from diskclient.models import PathMetadataResponse
from nsbrowser.errors import MetaError, PreviewError
from nsbrowser.gateway import NamespaceGateway, describe_failure
from nsbrowser.models import BrowsingContext, Metadata, Selection

logger = logging.getLogger(__name__)


class FileInspector:
    """Fetches and holds metadata and preview for the current selection.

    Attributes:
        gateway: The namespace gateway used for stat and read calls.
        preview_limit: Maximum number of characters kept from a preview.
        on_change: Called after every state change.
    """

    def __init__(
        self,
        gateway: NamespaceGateway,
        context: BrowsingContext,
        preview_limit: int = MAX_PREVIEW_CHARS,
        on_change: Callable[["FileInspector"], None] | None = None,
    ) -> None:
        if preview_limit <= 0:
            raise ValueError("preview_limit must be positive")
        self.gateway = gateway
        self.preview_limit = preview_limit
        self.on_change = on_change
        self._context = context
        self._selection: Selection | None = None
        self._metadata: Metadata | None = None
        self._metadata_error: str | None = None
        self._metadata_loading = False
        self._preview: str | None = None
        self._preview_error: str | None = None
        self._preview_loading = False
        self._metadata_issued = 0
        self._preview_issued = 0

    @property
    def context(self) -> BrowsingContext:
        return self._context

    @property
    def selection(self) -> Selection | None:
        return self._selection

    @property
    def metadata(self) -> Metadata | None:
        return self._metadata

    @property
    def metadata_error(self) -> str | None:
        return self._metadata_error

    @property
    def metadata_loading(self) -> bool:
        return self._metadata_loading

    @property
    def preview(self) -> str | None:
        return self._preview

    @property
    def preview_error(self) -> str | None:
        return self._preview_error

    @property
    def preview_loading(self) -> bool:
        return self._preview_loading

    async def inspect(self, selection: Selection | None) -> None:
        """Bind the inspector to ``selection`` and fetch its metadata.

        Everything known about the previous selection is discarded, and
        fetches still in flight for it will be ignored. ``None`` just
        clears the inspector.
        """
        self._bind(selection)
        if selection is not None:
            await self.fetch_metadata()

    def clear(self) -> None:
        """Dismiss the current selection."""
        self._bind(None)

    def set_context(self, context: BrowsingContext) -> None:
        """Switch to another browsing context, dropping the selection."""
        self._context = context
        self._bind(None)

    async def fetch_metadata(self) -> bool:
        """Stat the selected file.

        Returns:
            True if metadata was stored, False if the fetch failed, nothing
            is selected, or the selection changed before the answer arrived.
        """
        selection = self._selection
        if selection is None:
            return False

        self._metadata_issued += 1
        ticket = self._metadata_issued
        self._metadata_loading = True
        self._metadata_error = None
        self._notify()

        context = self._context
        try:
            raw = await self.gateway.stat_path(context.root, context.partition, selection.path)
            metadata = Metadata.from_response(_coerce_metadata(raw, selection.path), selection.path)
        except Exception as e:
            error = MetaError(describe_failure(e), path=selection.path, cause=e)
            if ticket != self._metadata_issued:
                logger.debug(f"Discarding stale metadata failure for {selection.path}")
                return False
            logger.warning(f"Metadata for {selection.path} failed: {error.message}")
            self._metadata_loading = False
            self._metadata_error = error.message
            self._notify()
            return False

        if ticket != self._metadata_issued:
            logger.debug(f"Discarding stale metadata for {selection.path}")
            return False

        self._metadata = metadata
        self._metadata_loading = False
        self._notify()
        return True

    async def fetch_preview(self) -> bool:
        """Read the selected file's contents, capped at ``preview_limit``.

        Returns:
            True if a preview was stored, False if the read failed, nothing
            is selected, or the selection changed before the answer arrived.
        """
        selection = self._selection
        if selection is None:
            return False

        self._preview_issued += 1
        ticket = self._preview_issued
        self._preview_loading = True
        self._preview_error = None
        self._notify()

        try:
            text = await self.gateway.read_preview(selection.path)
        except Exception as e:
            error = PreviewError(describe_failure(e), path=selection.path, cause=e)
            if ticket != self._preview_issued:
                logger.debug(f"Discarding stale preview failure for {selection.path}")
                return False
            logger.warning(f"Preview of {selection.path} failed: {error.message}")
            self._preview_loading = False
            self._preview_error = error.message
            self._notify()
            return False

        if ticket != self._preview_issued:
            logger.debug(f"Discarding stale preview for {selection.path}")
            return False

        if text is None:
            text = ""
        elif not isinstance(text, str):
            text = str(text)
        if len(text) > self.preview_limit:
            logger.debug(f"Truncating preview of {selection.path} from {len(text)} chars")
            text = text[: self.preview_limit]

        self._preview = text
        self._preview_loading = False
        self._notify()
        return True

    def _bind(self, selection: Selection | None) -> None:
        self._metadata_issued += 1
        self._preview_issued += 1
        self._selection = selection
        self._metadata = None
        self._metadata_error = None
        self._metadata_loading = False
        self._preview = None
        self._preview_error = None
        self._preview_loading = False
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)


def _coerce_metadata(raw: Any, path: str) -> PathMetadataResponse:
    if isinstance(raw, PathMetadataResponse):
        return raw
    if isinstance(raw, dict):
        raw = {"path": path, **raw}
    return PathMetadataResponse.model_validate(raw)
