"""Internal HTTP layer of the disk client.

Every backend route is a JSON POST. This module sends them through
``httpx.AsyncClient``, decodes the answers and turns failures into the
exceptions of ``diskclient.exceptions``:

- error bodies from the Fiber partition handlers (``{"error", "detail"}``),
  the command analyzer (``{"message"}``) and FastAPI-style services
  (``{"detail"}``) are reduced to one message;
- connection failures and timeouts become ``ConnectionError`` and
  ``TimeoutError``;
- when enabled, gateway errors (502/503/504), refused connections and
  timeouts are retried with exponential backoff.

This is an internal module and should not be imported directly by users.
"""

import asyncio
import logging
from typing import Any

import httpx

from diskclient.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    DiskClientError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Answers of a reverse proxy in front of a restarting backend
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Reduce an error response to ``(message, error_type, details)``.

    The partition handlers answer ``{"error": "cannot read path", "detail":
    "<os error>"}``; both parts end up in the message. Bodies that are not
    JSON contribute their text.
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"HTTP {response.status_code} error", None, None

    if not isinstance(body, dict):
        return str(body), None, None

    error_type = body.get("type")
    detail = body.get("detail")

    if "error" in body:
        if isinstance(detail, str) and detail:
            return f"{body['error']}: {detail}", error_type, {"detail": detail}
        return str(body["error"]), error_type, body.get("details")
    if "message" in body:
        return str(body["message"]), error_type, body.get("details")
    if isinstance(detail, str):
        return detail, error_type, body.get("details")
    if isinstance(detail, list):
        # FastAPI request validation: one entry per offending field
        messages = [
            f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}" for err in detail
        ]
        return "; ".join(messages), "validation_error", {"errors": detail}
    if isinstance(detail, dict):
        return detail.get("message", str(detail)), detail.get("type"), detail
    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the exception matching an unsuccessful response.

    Raises:
        BadRequestError: 400, the partition routes' answer for unreadable paths.
        NotFoundError: 404.
        ValidationError: 422.
        ServerError: Any 5xx.
        APIError: Any other non-2xx status.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    body = _decode_body(response)
    status = response.status_code

    if status == 400:
        raise BadRequestError(message, details=details, response_body=body)
    if status == 404:
        raise NotFoundError(message, details=details, response_body=body)
    if status == 422:
        raise ValidationError(message, details=details, response_body=body)
    if status >= 500:
        raise ServerError(message, status_code=status, details=details, response_body=body)
    raise APIError(
        message,
        status_code=status,
        error_type=error_type,
        details=details,
        response_body=body,
    )


def _decode_body(response: httpx.Response) -> Any:
    """Return the parsed JSON body, the raw text if it is not JSON, or None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Delay before retry number ``attempt`` (0-indexed), capped at 30 seconds."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


class AsyncHTTPClient:
    """JSON-over-POST client shared by all sub-clients.

    Attributes:
        base_url: Backend base URL, without a trailing slash.
        timeout: Per-request timeout in seconds.
        retry_enabled: Whether transient failures are retried.
        max_retries: Retries after the first attempt when enabled.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend base URL.
            timeout: Per-request timeout in seconds.
            retry_enabled: Whether transient failures are retried.
            max_retries: Retries after the first attempt when enabled.
            transport: Custom transport (e.g., ASGITransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def post(self, path: str, json: dict[str, Any] | None = None) -> Any:
        """POST ``json`` to ``path`` and return the decoded answer.

        Args:
            path: Route path, appended to ``base_url``.
            json: Request body.

        Returns:
            The parsed JSON body, the text body if it is not JSON, or None
            for an empty answer.

        Raises:
            ConnectionError: If the backend cannot be reached.
            TimeoutError: If the request exceeds ``timeout``.
            APIError: If the backend answers with an error status.
        """
        attempts = self.max_retries + 1 if self.retry_enabled else 1
        for attempt in range(attempts):
            last = attempt == attempts - 1
            try:
                response = await self._client.post(path, json=json)
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                error = self._transport_error(path, e)
                if last:
                    raise error from e
                logger.debug(f"POST {path} failed ({error.message}), retrying")
            else:
                if last or response.status_code not in RETRYABLE_STATUS_CODES:
                    _raise_for_status(response)
                    return _decode_body(response)
                logger.debug(f"POST {path} returned {response.status_code}, retrying")
            await asyncio.sleep(_calculate_backoff(attempt))

        raise RuntimeError("retry loop exited without a result")

    def _transport_error(self, path: str, exc: httpx.HTTPError) -> DiskClientError:
        url = f"{self.base_url}{path}"
        if isinstance(exc, httpx.TimeoutException):
            return TimeoutError(f"Request to {url} timed out", timeout=self.timeout, url=url)
        return ConnectionError(f"Failed to connect to {url}", url=url, cause=exc)
