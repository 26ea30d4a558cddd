"""Remote namespace browsing core.

Tracks where the user is in a partition's directory tree, loads directory
contents on demand (following the backend's one-time auto-home
suggestion), and inspects the selected file's metadata and content
preview. All backend access goes through a ``NamespaceGateway``.

Exports:
    NamespaceBrowser: Facade wiring navigation and inspection together.
    BrowserStateMachine: Directory navigation with last-navigation-wins.
    DirectoryLoader: Single directory load with the auto-home redirect.
    FileInspector: Metadata and preview of the selected file.
"""

from nsbrowser.browser import NamespaceBrowser
from nsbrowser.errors import BrowserError, LoadError, MetaError, PreviewError
from nsbrowser.gateway import NamespaceGateway
from nsbrowser.inspector import FileInspector
from nsbrowser.loader import DirectoryLoader
from nsbrowser.models import (
    BrowserStatus,
    BrowsingContext,
    Entry,
    EntryType,
    Listing,
    Metadata,
    Selection,
)
from nsbrowser.paths import Breadcrumb, breadcrumbs, child, normalize, prefix_up_to, segments
from nsbrowser.state import BrowserStateMachine

__all__ = [
    "NamespaceBrowser",
    "BrowserStateMachine",
    "DirectoryLoader",
    "FileInspector",
    "NamespaceGateway",
    # Errors
    "BrowserError",
    "LoadError",
    "MetaError",
    "PreviewError",
    # Models
    "Breadcrumb",
    "BrowserStatus",
    "BrowsingContext",
    "Entry",
    "EntryType",
    "Listing",
    "Metadata",
    "Selection",
    # Paths
    "breadcrumbs",
    "child",
    "normalize",
    "prefix_up_to",
    "segments",
]
