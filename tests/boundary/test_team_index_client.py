"""Tests for TeamIndexClient against a mocked Upstash index."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from upstash_vector.errors import UpstashError

from premier_guard.boundary.vdb.team_index_client import TeamIndexClient
from premier_guard.configs.vector_store import VectorStoreSettings
from premier_guard.core.exceptions import VectorStoreError
from premier_guard.models.chunk import ChunkKind
from premier_guard.models.index_entry import IndexEntry, TeamRow


@pytest.fixture
def vector_settings() -> VectorStoreSettings:
    return VectorStoreSettings(url="https://example-index.upstash.io", token="test-token")


@pytest.fixture
def mock_index() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def index_client(vector_settings: VectorStoreSettings, mock_index: AsyncMock) -> TeamIndexClient:
    return TeamIndexClient(vector_settings, index=mock_index)


class TestTeamIndexClientInit:
    """Test suite for client construction."""

    def test_missing_credentials_rejected(self) -> None:
        """Should refuse to build an index without url and token."""
        with pytest.raises(ValueError):
            TeamIndexClient(VectorStoreSettings(url="", token=""))


class TestTeamIndexClientQuery:
    """Test suite for top-1 similarity queries."""

    @pytest.mark.asyncio
    async def test_query_requests_top_one_with_metadata(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should send the chunk as data and ask for metadata."""
        mock_index.query.return_value = [MagicMock(score=0.93, metadata={"team": "Arsenal"})]

        result = await index_client.query("arsenal", ChunkKind.WORD)

        mock_index.query.assert_awaited_once_with(data="arsenal", top_k=1, include_metadata=True)
        assert result.chunk == "arsenal"
        assert result.kind == ChunkKind.WORD
        assert result.matched_label == "Arsenal"
        assert result.score == 0.93

    @pytest.mark.asyncio
    async def test_empty_response_scores_zero(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should treat no neighbour as score 0 without a label."""
        mock_index.query.return_value = []

        result = await index_client.query("beat", ChunkKind.SEMANTIC)

        assert result.score == 0.0
        assert result.matched_label is None

    @pytest.mark.asyncio
    async def test_missing_metadata_has_no_label(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should keep the score but no label when metadata is absent."""
        mock_index.query.return_value = [MagicMock(score=0.5, metadata=None)]

        result = await index_client.query("beat", ChunkKind.WORD)

        assert result.score == 0.5
        assert result.matched_label is None

    @pytest.mark.asyncio
    async def test_service_error_raises_vector_store_error(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should wrap vendor errors without retrying."""
        mock_index.query.side_effect = UpstashError("unauthorized")

        with pytest.raises(VectorStoreError) as exc_info:
            await index_client.query("arsenal", ChunkKind.WORD)

        assert exc_info.value.details["operation"] == "query"
        assert mock_index.query.await_count == 1


class TestTeamIndexClientUpsert:
    """Test suite for batch upserts."""

    @pytest.mark.asyncio
    async def test_upsert_sends_id_data_and_team_metadata(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should write each entry with its team as data and metadata."""
        entries = [
            IndexEntry.from_row(0, TeamRow(team="Arsenal")),
            IndexEntry.from_row(1, TeamRow(team="Chelsea")),
        ]

        await index_client.upsert(entries)

        vectors = mock_index.upsert.await_args.kwargs["vectors"]
        assert [v.id for v in vectors] == [0, 1]
        assert [v.data for v in vectors] == ["Arsenal", "Chelsea"]
        assert [v.metadata for v in vectors] == [{"team": "Arsenal"}, {"team": "Chelsea"}]

    @pytest.mark.asyncio
    async def test_upsert_failure_raises_vector_store_error(
        self, index_client: TeamIndexClient, mock_index: AsyncMock
    ) -> None:
        """Should wrap vendor errors with the batch size."""
        mock_index.upsert.side_effect = UpstashError("quota exceeded")

        with pytest.raises(VectorStoreError) as exc_info:
            await index_client.upsert([IndexEntry.from_row(0, TeamRow(team="Arsenal"))])

        assert exc_info.value.details["operation"] == "upsert"
        assert exc_info.value.details["entry_count"] == 1
