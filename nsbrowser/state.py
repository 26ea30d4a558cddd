"""Browser state machine.

Owns "where am I in the tree": the current path, the displayed listing, the
load status and the selected file. Every navigation re-enters ``loading``
and resolves to ``ready`` or ``failed``.

Loads may overlap. Each one takes a ticket from a monotonically increasing
counter and only the holder of the latest ticket may update state, so a
slow response can never overwrite the result of a later navigation.
"""

import logging
from typing import Callable

from nsbrowser.errors import LoadError
from nsbrowser.loader import DirectoryLoader
from nsbrowser.models import BrowserStatus, BrowsingContext, Entry, Listing, Selection
from nsbrowser.paths import ROOT, child, normalize, prefix_up_to, segments

logger = logging.getLogger(__name__)

ChangeCallback = Callable[["BrowserStateMachine"], None]


class BrowserStateMachine:
    """Navigation state for one browsing context.

    Failures never propagate out of the navigation methods: a failed load
    sets ``status`` to ``failed`` and ``error`` to a message while the
    previous listing stays on display.

    Example:
        machine = BrowserStateMachine(DirectoryLoader(gateway), context)
        await machine.start()
        await machine.enter_folder("docs")
        print(machine.current_path, [e.name for e in machine.entries])
    """

    def __init__(
        self,
        loader: DirectoryLoader,
        context: BrowsingContext,
        on_change: ChangeCallback | None = None,
    ) -> None:
        """Initialize the state machine in ``idle``.

        Args:
            loader: Directory loader used for every navigation.
            context: The namespace to browse.
            on_change: Called after every state change.
        """
        self.loader = loader
        self.on_change = on_change
        self._context = context
        self._current_path = ROOT
        self._listing: Listing | None = None
        self._status = BrowserStatus.IDLE
        self._error: str | None = None
        self._selection: Selection | None = None
        self._issued = 0

    # ---------- observers ----------

    @property
    def context(self) -> BrowsingContext:
        return self._context

    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def listing(self) -> Listing | None:
        return self._listing

    @property
    def entries(self) -> tuple[Entry, ...]:
        if self._listing is None:
            return ()
        return self._listing.entries

    @property
    def status(self) -> BrowserStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is BrowserStatus.LOADING

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def selection(self) -> Selection | None:
        return self._selection

    # ---------- navigation ----------

    async def start(self) -> bool:
        """Load the root of the context (subject to the auto-home redirect)."""
        return await self._navigate(ROOT)

    async def enter_folder(self, name: str) -> bool:
        """Navigate into the child directory ``name`` of the current path.

        Returns:
            True if this navigation's result was applied, False if it
            failed or was superseded by a later navigation.

        Raises:
            ValueError: If ``name`` has no path segment (empty or only
                slashes), which would otherwise reload the current path.
        """
        if not segments(name):
            raise ValueError(f"invalid folder name {name!r}")
        return await self._navigate(child(self._current_path, name))

    async def go_to_breadcrumb(self, index: int) -> bool:
        """Navigate to the ancestor made of the first ``index + 1`` segments."""
        return await self._navigate(prefix_up_to(self._current_path, index))

    async def go_to_root(self) -> bool:
        return await self.go_to_breadcrumb(-1)

    async def refresh(self) -> bool:
        """Reload the current path; the manual retry after a failure."""
        return await self._navigate(self._current_path)

    # ---------- selection ----------

    def select_file(self, entry: Entry) -> Selection:
        """Select a file entry of the current listing.

        No request is made here; the inspector fetches metadata once it is
        handed the selection.

        Raises:
            ValueError: If ``entry`` is a directory.
        """
        if entry.is_dir:
            raise ValueError(f"{entry.name} is a directory, use enter_folder()")
        self._selection = Selection(name=entry.name, path=child(self._current_path, entry.name))
        self._notify()
        return self._selection

    def clear_selection(self) -> None:
        if self._selection is not None:
            self._selection = None
            self._notify()

    def reset(self, context: BrowsingContext) -> None:
        """Switch to another browsing context.

        Goes back to ``idle`` at root with no listing, error or selection.
        Loads still in flight for the old context are discarded when they
        resolve. Call ``start()`` afterwards to load the new root.
        """
        self._issued += 1
        self._context = context
        self._current_path = ROOT
        self._listing = None
        self._status = BrowserStatus.IDLE
        self._error = None
        self._selection = None
        logger.info(f"Browsing context switched to {context.root}:{context.partition}")
        self._notify()

    # ---------- internals ----------

    async def _navigate(self, path: str) -> bool:
        self._issued += 1
        ticket = self._issued
        target = normalize(path)

        self._status = BrowserStatus.LOADING
        self._error = None
        self._notify()

        try:
            listing = await self.loader.load(self._context, target)
        except LoadError as e:
            if ticket != self._issued:
                logger.debug(f"Discarding superseded failure for {target}")
                return False
            self._status = BrowserStatus.FAILED
            self._error = e.message
            self._notify()
            return False

        if ticket != self._issued:
            logger.debug(f"Discarding superseded listing of {listing.path}")
            return False

        if listing.path != self._current_path:
            self._selection = None
        self._listing = listing
        self._current_path = listing.path
        self._status = BrowserStatus.READY
        logger.info(f"Showing {listing.path} ({len(listing.entries)} entries)")
        self._notify()
        return True

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
