"""Errors raised by the disk client.

Transport failures and error answers from the backend are kept apart so
the browser can tell "backend unreachable" from "path unreadable":

    DiskClientError
    ├── ConnectionError    backend could not be reached
    ├── TimeoutError       no answer within the configured timeout
    └── APIError           backend answered with a non-2xx status
        ├── BadRequestError    400, also used for unreadable paths
        ├── NotFoundError      404
        ├── ValidationError    422
        └── ServerError        5xx

Example::

    try:
        await client.namespace.list_path("/tmp/a.mia", "part1", "/nope")
    except BadRequestError as e:
        print(f"Cannot list: {e.message}")
"""

from typing import Any


class DiskClientError(Exception):
    """Root of all disk client errors; ``message`` is the display text."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(DiskClientError):
    """The backend at ``url`` refused or dropped the connection.

    ``cause`` keeps the httpx exception that triggered it.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} (url: {self.url})" if self.url else self.message


class TimeoutError(DiskClientError):
    """No answer from ``url`` within ``timeout`` seconds."""

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        context = [f"timeout: {self.timeout}s"] if self.timeout is not None else []
        if self.url:
            context.append(f"url: {self.url}")
        return f"{self.message} ({', '.join(context)})" if context else self.message


class APIError(DiskClientError):
    """The backend answered with an error status.

    Attributes:
        status_code: HTTP status of the answer.
        error_type: Short category, set by the subclasses.
        details: Structured extras parsed from the body, if any.
        response_body: Decoded body as received.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        prefix = f"[HTTP {self.status_code}]"
        if self.error_type:
            prefix = f"{prefix} [{self.error_type}]"
        return f"{prefix} {self.message}"


class BadRequestError(APIError):
    """HTTP 400.

    The partition routes answer 400 both for malformed JSON bodies and for
    paths that cannot be read, e.g. ``{"error": "cannot read path",
    "detail": "open /root: permission denied"}``.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None, response_body: Any = None) -> None:
        super().__init__(message, 400, "bad_request", details, response_body)


class NotFoundError(APIError):
    """HTTP 404, usually a route missing from an older backend."""

    def __init__(self, message: str, details: dict[str, Any] | None = None, response_body: Any = None) -> None:
        super().__init__(message, 404, "not_found", details, response_body)


class ValidationError(APIError):
    """HTTP 422."""

    def __init__(self, message: str, details: dict[str, Any] | None = None, response_body: Any = None) -> None:
        super().__init__(message, 422, "validation_error", details, response_body)


class ServerError(APIError):
    """Any 5xx. Gateway errors are retried first when retry is enabled."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code, "server_error", details, response_body)
