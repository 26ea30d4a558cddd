"""Data model of the namespace browser.

Listings, selections and metadata are immutable snapshots; the state
machine and the inspector replace them wholesale instead of patching them.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from diskclient.models import PathMetadataResponse
from nsbrowser.paths import normalize


class EntryType(str, Enum):
    """Kind of a directory entry."""

    DIR = "dir"
    FILE = "file"


class BrowserStatus(str, Enum):
    """Lifecycle of the browser state machine.

    ``idle`` until a context is established, then ``loading`` on every
    navigation and ``ready`` or ``failed`` once the latest load resolves.
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class Entry(BaseModel):
    """One child of a listed directory."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Entry name")
    type: EntryType = Field(..., description="Entry type")

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIR


class Listing(BaseModel):
    """The result of loading one directory.

    Entries keep the order the backend returned them in.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Normalized directory path")
    entries: tuple[Entry, ...] = Field(default=(), description="Directory entries")

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        return normalize(value)


class Selection(BaseModel):
    """The file currently handed to the inspector."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        return normalize(value)


class BrowsingContext(BaseModel):
    """Identifies which namespace is being browsed.

    Attributes:
        root: Disk image path on the backend, or ``HOST_FS`` for the
            backend host's own filesystem.
        partition: Partition name on that disk.
    """

    model_config = ConfigDict(frozen=True)

    HOST_FS: ClassVar[str] = "__hostfs"

    root: str = Field(..., min_length=1)
    partition: str = ""

    @classmethod
    def host(cls) -> "BrowsingContext":
        """Context for the backend host's filesystem."""
        return cls(root=cls.HOST_FS)

    @property
    def is_host(self) -> bool:
        return self.root == self.HOST_FS


class Metadata(BaseModel):
    """Metadata of the selected file.

    Every optional field is independently ``None`` when the backend did not
    report it.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    type: str | None = None
    name: str | None = None
    size: int | None = None
    modified: str | None = None
    created: str | None = None
    permissions: str | None = None

    @classmethod
    def from_response(cls, response: PathMetadataResponse, fallback_path: str) -> "Metadata":
        """Build metadata from a stat response.

        The requested path is used when the backend echoes an empty one.
        """
        data = response.model_dump()
        data["path"] = normalize(response.path or fallback_path)
        return cls.model_validate(data)
