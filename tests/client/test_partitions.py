"""Unit tests for AsyncPartitionsClient."""

from unittest.mock import AsyncMock, MagicMock

from diskclient._partitions import PARTITIONS_ENDPOINT, AsyncPartitionsClient
from diskclient.models import ListPartitionsResponse, PartitionSummary


class TestPartitionSummary:
    """Tests for the PartitionSummary model."""

    def test_label_prefers_name(self) -> None:
        summary = PartitionSummary.model_validate({"name": "part1", "id": "611A"})

        assert summary.label == "part1"

    def test_label_falls_back_to_id(self) -> None:
        summary = PartitionSummary.model_validate({"id": "611A", "isMounted": True})

        assert summary.label == "611A"
        assert summary.is_mounted is True

    def test_label_empty_when_unnamed(self) -> None:
        assert PartitionSummary().label == ""


class TestAsyncPartitionsClient:
    """Tests for AsyncPartitionsClient.list_partitions()."""

    async def test_list_partitions_returns_response_model(self) -> None:
        mock_http = MagicMock()
        mock_http.post = AsyncMock(
            return_value={
                "partitions": [
                    {"name": "part1", "size": 5000, "start": 161, "isMounted": False},
                    {"id": "611A", "size": 3000, "start": 5161, "isMounted": True},
                ]
            }
        )

        result = await AsyncPartitionsClient(mock_http).list_partitions("/tmp/disco1.mia")

        assert isinstance(result, ListPartitionsResponse)
        assert [p.label for p in result.partitions] == ["part1", "611A"]
        mock_http.post.assert_awaited_once_with(
            PARTITIONS_ENDPOINT,
            json={"path": "/tmp/disco1.mia"},
        )

    async def test_list_partitions_handles_empty_body(self) -> None:
        mock_http = MagicMock()
        mock_http.post = AsyncMock(return_value=None)

        result = await AsyncPartitionsClient(mock_http).list_partitions("/tmp/empty.mia")

        assert result.partitions == []
