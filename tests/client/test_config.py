"""Unit tests for ClientConfig."""

from unittest.mock import MagicMock

import pydantic
import pytest

from diskclient.config import DEFAULT_BASE_URL, MAX_PREVIEW_CHARS, ClientConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove any DISK_API_* variables inherited from the environment."""
    for name in ["BASE_URL", "TIMEOUT", "RETRY_ENABLED", "MAX_RETRIES", "PREVIEW_LIMIT"]:
        monkeypatch.delenv(f"DISK_API_{name}", raising=False)
    return monkeypatch


class TestClientConfigDefaults:
    """Tests for ClientConfig default values and validation."""

    def test_defaults(self) -> None:
        config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30.0
        assert config.retry_enabled is False
        assert config.max_retries == 3
        assert config.preview_limit == MAX_PREVIEW_CHARS == 200_000

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(timeout=0)

    def test_rejects_non_positive_preview_limit(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(preview_limit=0)


class TestClientConfigFromEnv:
    """Tests for ClientConfig.from_env()."""

    def test_unset_variables_keep_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert ClientConfig.from_env(dotenv=False) == ClientConfig()

    def test_reads_prefixed_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISK_API_BASE_URL", "http://backend:3000")
        clean_env.setenv("DISK_API_TIMEOUT", "2.5")
        clean_env.setenv("DISK_API_RETRY_ENABLED", "true")
        clean_env.setenv("DISK_API_MAX_RETRIES", "5")
        clean_env.setenv("DISK_API_PREVIEW_LIMIT", "1000")

        config = ClientConfig.from_env(dotenv=False)

        assert config.base_url == "http://backend:3000"
        assert config.timeout == 2.5
        assert config.retry_enabled is True
        assert config.max_retries == 5
        assert config.preview_limit == 1000

    def test_empty_values_are_ignored(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISK_API_BASE_URL", "")

        assert ClientConfig.from_env(dotenv=False).base_url == DEFAULT_BASE_URL

    def test_custom_prefix(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("EXPLORER_BASE_URL", "http://other:8080")

        assert ClientConfig.from_env(prefix="EXPLORER_", dotenv=False).base_url == "http://other:8080"

    def test_invalid_value_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISK_API_TIMEOUT", "soon")

        with pytest.raises(pydantic.ValidationError):
            ClientConfig.from_env(dotenv=False)

    def test_loads_dotenv_by_default(self, clean_env: pytest.MonkeyPatch) -> None:
        loader = MagicMock()
        clean_env.setattr("diskclient.config.load_dotenv", loader)

        ClientConfig.from_env()

        loader.assert_called_once_with()
