"""Errors raised inside the browsing core.

All three kinds are local and recoverable. The state machine and the
inspector catch them and expose the message as state; they never escape a
navigation or inspection call.
"""


class BrowserError(Exception):
    """Base class for browsing core failures.

    Attributes:
        message: Human-readable error description.
        path: The namespace path the failed operation targeted.
        cause: The gateway exception that triggered the failure, if any.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class LoadError(BrowserError):
    """A directory listing could not be loaded."""


class MetaError(BrowserError):
    """Metadata for the selected file could not be fetched."""


class PreviewError(BrowserError):
    """The selected file's contents could not be read."""
