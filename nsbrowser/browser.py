"""UI-facing facade over the browsing core.

``NamespaceBrowser`` wires one ``BrowserStateMachine`` and one
``FileInspector`` to a shared gateway: navigation intents go to the state
machine, selecting a file hands its path to the inspector, and leaving the
directory the selection belongs to dismisses the inspector.

Example:
    async with NamespaceBrowser.from_config(
        BrowsingContext(root="/tmp/d1.mia", partition="part1"),
        ClientConfig.from_env(),
    ) as browser:
        await browser.open()
        await browser.enter_folder("docs")
        await browser.select_file(browser.entries[0])
        await browser.load_preview()
        print(browser.metadata, browser.preview)
"""

from typing import Any, Awaitable, Callable

from diskclient.client import AsyncDiskClient
from diskclient.config import MAX_PREVIEW_CHARS, ClientConfig
from nsbrowser.gateway import NamespaceGateway
from nsbrowser.inspector import FileInspector
from nsbrowser.loader import DirectoryLoader
from nsbrowser.models import BrowserStatus, BrowsingContext, Entry, Metadata, Selection
from nsbrowser.paths import Breadcrumb, breadcrumbs
from nsbrowser.state import BrowserStateMachine


class NamespaceBrowser:
    """Read-only browser for one namespace.

    Attributes:
        gateway: The shared namespace gateway.
        machine: Directory navigation state.
        inspector: Selected-file metadata and preview state.
        on_change: Called with the browser after any state change.
    """

    def __init__(
        self,
        gateway: NamespaceGateway,
        context: BrowsingContext,
        preview_limit: int = MAX_PREVIEW_CHARS,
        on_change: Callable[["NamespaceBrowser"], None] | None = None,
    ) -> None:
        self.gateway = gateway
        self.on_change = on_change
        self.machine = BrowserStateMachine(
            DirectoryLoader(gateway), context, on_change=self._relay
        )
        self.inspector = FileInspector(
            gateway, context, preview_limit=preview_limit, on_change=self._relay
        )
        self._client: AsyncDiskClient | None = None

    @classmethod
    def from_config(
        cls,
        context: BrowsingContext,
        config: ClientConfig | None = None,
        *,
        transport: Any = None,
        on_change: Callable[["NamespaceBrowser"], None] | None = None,
    ) -> "NamespaceBrowser":
        """Build a browser backed by an ``AsyncDiskClient``.

        The browser owns the client and closes it in ``aclose()``.

        Args:
            context: The namespace to browse.
            config: Connection settings (defaults to ``ClientConfig()``).
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
            on_change: Called after any state change.
        """
        client = AsyncDiskClient(config, transport=transport)
        browser = cls(
            client.namespace,
            context,
            preview_limit=client.config.preview_limit,
            on_change=on_change,
        )
        browser._client = client
        return browser

    async def aclose(self) -> None:
        """Close the owned HTTP client, if any."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def __aenter__(self) -> "NamespaceBrowser":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # ---------- observers ----------

    @property
    def context(self) -> BrowsingContext:
        return self.machine.context

    @property
    def current_path(self) -> str:
        return self.machine.current_path

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self.machine.entries

    @property
    def status(self) -> BrowserStatus:
        return self.machine.status

    @property
    def loading(self) -> bool:
        return self.machine.loading

    @property
    def error(self) -> str | None:
        return self.machine.error

    @property
    def breadcrumbs(self) -> list[Breadcrumb]:
        return breadcrumbs(self.machine.current_path)

    @property
    def selection(self) -> Selection | None:
        return self.machine.selection

    @property
    def metadata(self) -> Metadata | None:
        return self.inspector.metadata

    @property
    def metadata_error(self) -> str | None:
        return self.inspector.metadata_error

    @property
    def preview(self) -> str | None:
        return self.inspector.preview

    @property
    def preview_error(self) -> str | None:
        return self.inspector.preview_error

    # ---------- navigation ----------

    async def open(self) -> bool:
        """Load the context's root (or the home the backend suggests)."""
        return await self._navigation(self.machine.start())

    async def enter_folder(self, name: str) -> bool:
        return await self._navigation(self.machine.enter_folder(name))

    async def go_to_breadcrumb(self, index: int) -> bool:
        return await self._navigation(self.machine.go_to_breadcrumb(index))

    async def go_to_root(self) -> bool:
        return await self._navigation(self.machine.go_to_root())

    async def refresh(self) -> bool:
        return await self._navigation(self.machine.refresh())

    async def switch_context(self, context: BrowsingContext) -> bool:
        """Start over in another namespace, at its root."""
        self.machine.reset(context)
        self.inspector.set_context(context)
        return await self.open()

    # ---------- inspection ----------

    async def select_file(self, entry: Entry) -> Selection:
        """Select a file of the current listing and fetch its metadata.

        Raises:
            ValueError: If ``entry`` is a directory.
        """
        selection = self.machine.select_file(entry)
        await self.inspector.inspect(selection)
        return selection

    async def load_preview(self) -> bool:
        """Fetch the capped content preview of the selected file."""
        return await self.inspector.fetch_preview()

    async def reload_metadata(self) -> bool:
        """Re-run the metadata fetch; the manual retry after a failure."""
        return await self.inspector.fetch_metadata()

    def close_file(self) -> None:
        """Dismiss the inspector."""
        self.machine.clear_selection()
        self.inspector.clear()

    # ---------- internals ----------

    async def _navigation(self, pending: Awaitable[bool]) -> bool:
        applied = await pending
        if self.machine.selection is None and self.inspector.selection is not None:
            self.inspector.clear()
        return applied

    def _relay(self, _source: object) -> None:
        if self.on_change is not None:
            self.on_change(self)
