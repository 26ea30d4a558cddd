"""Response models for the disk simulation API client.

The backend attaches Spanish-language duplicates (``tipo``) and extra
presentation fields to most payloads; every model ignores unknown keys so
only the fields the client relies on are validated.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

__all__ = [
    "AnalyzeResponse",
    "ListPartitionsResponse",
    "ListPathResponse",
    "NamespaceEntry",
    "PartitionSummary",
    "PathMetadataResponse",
]


class NamespaceEntry(BaseModel):
    """One child of a listed directory.

    Attributes:
        name: Entry name within its parent directory.
        type: Either "dir" or "file".
        extension: File extension without the dot, if any.
        size: Size in bytes as reported by the backend.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Entry name")
    type: Literal["dir", "file"] = Field(..., description="Entry type")
    extension: str | None = Field(None, description="File extension")
    size: int | None = Field(None, description="Size in bytes")


class ListPathResponse(BaseModel):
    """Response model for /api/disk/partition/list.

    Attributes:
        path: The path the backend actually listed, if echoed.
        entries: Children of the listed path, in backend order.
        auto_home: Suggested starting directory (only meaningful at root).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    path: str | None = Field(None, description="Listed path")
    entries: list[NamespaceEntry] = Field(default_factory=list, description="Directory entries")
    auto_home: str | None = Field(None, alias="autoHome", description="Suggested home directory")


class PathMetadataResponse(BaseModel):
    """Response model for /api/disk/partition/stat.

    Every field except ``path`` may be omitted by the backend.
    """

    model_config = ConfigDict(extra="ignore")

    path: str = Field(..., description="Path that was inspected")
    name: str | None = Field(None, description="Display name")
    type: str | None = Field(None, description="Entry type (dir/file)")
    size: int | None = Field(None, description="Size in bytes")
    modified: str | None = Field(None, description="Last modification timestamp")
    created: str | None = Field(None, description="Creation timestamp")
    permissions: str | None = Field(None, description="Permission string, e.g. rw-r--r--")


class AnalyzeResponse(BaseModel):
    """Response model for the command analyzer endpoint (/analyze).

    Older backend builds name the output list ``resultados``.

    Attributes:
        results: Output lines produced by the executed command.
    """

    model_config = ConfigDict(extra="ignore")

    results: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("results", "resultados"),
        description="Command output lines",
    )

    @property
    def text(self) -> str:
        """All output lines joined with newlines."""
        return "\n".join(self.results)


class PartitionSummary(BaseModel):
    """One partition of a disk image.

    Partitions may be identified by name or, once mounted, by id; ``label``
    picks whichever the backend provided.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    id: str | None = None
    size: int | None = None
    start: int | None = None
    is_mounted: bool = Field(False, alias="isMounted")

    @property
    def label(self) -> str:
        return self.name or self.id or ""


class ListPartitionsResponse(BaseModel):
    """Response model for /api/disk/partitions."""

    model_config = ConfigDict(extra="ignore")

    partitions: list[PartitionSummary] = Field(default_factory=list)
