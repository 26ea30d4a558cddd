"""Client configuration.

Configuration is an explicit object handed to the client at construction
time. ``ClientConfig.from_env`` is a convenience for applications that keep
their settings in environment variables or a ``.env`` file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "http://localhost:3000"

# Longest file preview kept in memory, in characters
MAX_PREVIEW_CHARS = 200_000


class ClientConfig(BaseModel):
    """Connection and browsing settings.

    Attributes:
        base_url: Base URL of the disk simulation backend.
        timeout: Per-request timeout in seconds.
        retry_enabled: Whether transient failures are retried by the transport.
        max_retries: Maximum retry attempts when retry is enabled.
        preview_limit: Maximum number of characters kept from a file preview.
    """

    base_url: str = Field(DEFAULT_BASE_URL, description="Backend base URL")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    retry_enabled: bool = Field(False, description="Retry transient failures")
    max_retries: int = Field(3, ge=0, description="Maximum retry attempts")
    preview_limit: int = Field(MAX_PREVIEW_CHARS, gt=0, description="Preview length cap")

    @classmethod
    def from_env(cls, prefix: str = "DISK_API_", dotenv: bool = True) -> "ClientConfig":
        """Build a config from environment variables.

        Reads ``<prefix>BASE_URL``, ``<prefix>TIMEOUT``,
        ``<prefix>RETRY_ENABLED``, ``<prefix>MAX_RETRIES`` and
        ``<prefix>PREVIEW_LIMIT``. Unset variables keep their defaults.

        Args:
            prefix: Environment variable prefix.
            dotenv: Load a ``.env`` file first (existing variables win).

        Returns:
            The validated configuration.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if dotenv:
            load_dotenv()

        values = {}
        for field_name in cls.model_fields:
            raw = os.environ.get(f"{prefix}{field_name.upper()}")
            if raw is not None and raw != "":
                values[field_name] = raw
        return cls.model_validate(values)
